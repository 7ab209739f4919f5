import moderngl
from spotzoom.services.shader_source import ShaderSource, VERTEX_SHADER, PLAIN_FRAGMENT_SHADER, SPOTLIGHT_FRAGMENT_SHADER
from spotzoom.state import CameraState, RenderPlan
from spotzoom.utilities.errors import StartupError
from spotzoom.utilities.gl_helpers import tryset, unit_quad_vertices


class Camera:
    """Draws the captured texture through the 2D camera, optionally wrapped in the spotlight shader."""

    def __init__(self, ctx: moderngl.Context, shader_source: ShaderSource, texture: moderngl.Texture,
                 tex_size: tuple):
        self.ctx = ctx
        self.shader_source = shader_source
        self.texture = texture
        self.tex_size = tex_size

        self.program = None
        self.spotlight_program = None
        self.vao = None
        self.spotlight_vao = None
        self.vbo = self.ctx.buffer(unit_quad_vertices().tobytes())

        try:
            self._build_programs()
        except moderngl.Error as e:
            raise StartupError(f"Failed to compile shaders: {e}") from e

    def _build_programs(self):
        vert_source = self.shader_source.read(VERTEX_SHADER)
        program = self.ctx.program(
            vertex_shader=vert_source,
            fragment_shader=self.shader_source.read(PLAIN_FRAGMENT_SHADER)
        )
        spotlight_program = self.ctx.program(
            vertex_shader=vert_source,
            fragment_shader=self.shader_source.read(SPOTLIGHT_FRAGMENT_SHADER)
        )

        vao = self.ctx.vertex_array(program, [(self.vbo, '2f', 'in_position')])
        spotlight_vao = self.ctx.vertex_array(spotlight_program, [(self.vbo, '2f', 'in_position')])

        # Only replace programs once everything compiled
        previous = (self.vao, self.spotlight_vao, self.program, self.spotlight_program)
        self.program, self.spotlight_program = program, spotlight_program
        self.vao, self.spotlight_vao = vao, spotlight_vao
        for resource in previous:
            if resource is not None:
                resource.release()

    def reload(self) -> bool:
        """Reload shaders from the source. Safe to call mid-execution; keeps the old programs on failure."""
        if not self.shader_source.supports_reload:
            return False
        try:
            self._build_programs()
            print("Spotlight shaders reloaded successfully")
            return True
        except (moderngl.Error, StartupError) as e:
            print(f"Warning: Failed to reload shaders: {e}")
            return False

    def _set_camera_uniforms(self, program, camera: CameraState, window_size):
        tryset(program, 'cam_target', tuple(camera.target))
        tryset(program, 'cam_offset', tuple(camera.offset))
        tryset(program, 'cam_zoom', camera.zoom)
        tryset(program, 'window_size', tuple(float(v) for v in window_size))
        tryset(program, 'tex_origin', (0.0, 0.0))
        tryset(program, 'tex_size', tuple(float(v) for v in self.tex_size))

    def render(self, plan: RenderPlan, camera: CameraState, window_size, framebuffer_size):
        """Clear and draw one frame according to the plan."""
        self.ctx.screen.use()
        self.ctx.viewport = (0, 0, framebuffer_size[0], framebuffer_size[1])
        self.ctx.clear(*plan.clear_color_normalized)

        if plan.spotlight_active:
            program, vao = self.spotlight_program, self.spotlight_vao
            uniforms = plan.uniforms
            tryset(program, 'spotlightTint', uniforms.tint)
            tryset(program, 'cursorPosition', uniforms.cursor_position)
            tryset(program, 'spotlightRadiusMultiplier', uniforms.radius_multiplier)
        else:
            program, vao = self.program, self.vao

        self._set_camera_uniforms(program, camera, window_size)
        tryset(program, 'view_tex', 0)
        self.texture.use(location=0)
        vao.render(moderngl.TRIANGLES)

    def release(self):
        for resource in (self.vao, self.spotlight_vao, self.vbo, self.program, self.spotlight_program):
            if resource is not None:
                resource.release()
