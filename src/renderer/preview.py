# renderer/preview.py
import pygame
from renderer.canvas import Canvas


def show_preview(canvas: Canvas, title: str = "Ray Tracer", scale: int = 1,
                 tone_map: str = "clamp", **params):
    """
    Opens a pygame window showing the canvas until it is closed or Escape
    is pressed.
    """
    pygame.init()
    try:
        window_size = (canvas.width * scale, canvas.height * scale)
        screen = pygame.display.set_mode(window_size)
        pygame.display.set_caption(title)

        # surfarray expects (width, height, 3)
        image = canvas.to_array(tone_map, **params).swapaxes(0, 1)
        surf = pygame.surfarray.make_surface(image)
        if scale != 1:
            surf = pygame.transform.scale(surf, window_size)

        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            screen.blit(surf, (0, 0))
            pygame.display.flip()
            clock.tick(30)
    finally:
        pygame.quit()
