import os


def pytest_configure(config):
    """Force SDL's dummy drivers so viewer tests never need a display or sound card.

    Set before any test imports pygame; an explicit driver in the environment
    is left untouched.
    """
    os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
    os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')
