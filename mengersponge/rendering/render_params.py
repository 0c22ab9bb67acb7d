from ..util import color

# Sponge
level = 2  # Fractal level, 0 to 3 are practical
initial_size = 300  # Edge length of the level 0 cube, in pixels

# Canvas and camera
canvas_size = (800, 600)
field_of_view = 60  # Vertical, degrees

background = color.BLACK
ambient = 50  # Gray level of the ambient light

# Point light orbiting around the vertical axis
light_color = color.WHITE
light_orbit_radius = 500
light_orbit_speed = 0.02  # Radians per frame

rotation_speed = 0.01  # Radians per frame

# Depth gradient, gradient_start is used for cubes with the lowest z
gradient_start = color.RED
gradient_end = color.BLUE

specular = color.WHITE
shininess = 50

gif_frame_count = 157  # Quarter turn, the sponge looks the same after rotating 90 degrees
gif_frame_duration = 40  # ms
window_interval = 16  # ms between frames of the live window
