class StartupError(RuntimeError):
    """Fatal problem while bootstrapping the overlay (no outputs, capture, window, shaders).

    Raised by the services before the frame loop starts; main() reports it on
    stderr and exits with a non-zero status.
    """
