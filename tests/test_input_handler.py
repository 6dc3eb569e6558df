import pygame
import pytest

from spriterotate.input_handler import InputHandler


@pytest.fixture
def feed_events(monkeypatch):
    """Replace pygame's event queue with a fixed list of events."""

    def _feed(*events):
        monkeypatch.setattr(pygame.event, "get", lambda: list(events))

    return _feed


def test_defaults():
    handler = InputHandler()
    assert not handler.should_quit()
    assert not handler.click_pressed()
    assert not handler.mouse_moved()
    assert handler.get_mouse_pos() == (0, 0)


@pytest.mark.parametrize(
    "event",
    [
        pygame.event.Event(pygame.QUIT),
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE),
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_x),
    ],
)
def test_quit_events(feed_events, event):
    handler = InputHandler()
    feed_events(event)
    handler.process_events()
    assert handler.should_quit()


def test_mouse_motion_and_click(feed_events):
    handler = InputHandler()
    feed_events(
        pygame.event.Event(pygame.MOUSEMOTION, pos=(10, 20)),
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(30, 40)),
    )
    handler.process_events()
    assert handler.mouse_moved()
    assert handler.click_pressed()
    assert handler.get_mouse_pos() == (30, 40)

    # Flags reset on the next frame, position is kept
    feed_events()
    handler.process_events()
    assert not handler.mouse_moved()
    assert not handler.click_pressed()
    assert handler.get_mouse_pos() == (30, 40)


def test_right_click_ignored(feed_events):
    handler = InputHandler()
    feed_events(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(1, 1)))
    handler.process_events()
    assert not handler.click_pressed()
