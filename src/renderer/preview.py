# renderer/preview.py
import numpy as np
import pygame


class LivePreview:
    """
    A pygame window that shows scanlines as the renderer finishes them.

    Usage:
        preview = LivePreview(width, height)
        renderer.render(world, on_row=preview.update_row)
        preview.wait()
    """
    def __init__(self, width: int, height: int, title: str = "Path Tracer"):
        self.width = width
        self.height = height
        pygame.init()
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        self.frame = np.zeros((height, width, 3), dtype=np.uint8)
        self.closed = False

    def update_row(self, j: int, row: bytes):
        if self.closed:
            return
        self.frame[j] = np.frombuffer(row, dtype=np.uint8).reshape(self.width, 3)
        self._pump()
        if not self.closed:
            self._draw()

    def _draw(self):
        # surfarray is indexed (x, y), the frame (y, x)
        surface = pygame.surfarray.make_surface(self.frame.swapaxes(0, 1))
        self.screen.blit(surface, (0, 0))
        pygame.display.flip()

    def _pump(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.close()
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.close()

    def wait(self):
        """Keeps the finished image on screen until the window is closed."""
        clock = pygame.time.Clock()
        while not self.closed:
            self._pump()
            clock.tick(30)

    def close(self):
        if not self.closed:
            self.closed = True
            pygame.quit()
