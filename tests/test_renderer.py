from functools import partial

import pytest

from gameframe.renderer import LayerType, Renderer


def test_layers_drawn_in_ascending_order():
    calls = []
    renderer = Renderer()
    renderer.add_draw(LayerType.UI, False, partial(calls.append, "ui"))
    renderer.add_draw(LayerType.FIRST, False, partial(calls.append, "first"))
    renderer.add_draw(LayerType.OBJECT, False, partial(calls.append, "object"))
    renderer.draw()
    assert calls == ["first", "object", "ui"]


def test_commands_within_layer_keep_insertion_order():
    calls = []
    renderer = Renderer()
    for tag in ("a", "b", "c"):
        renderer.add_draw(LayerType.OBJECT, False, partial(calls.append, tag))
    renderer.draw()
    assert calls == ["a", "b", "c"]


def test_depth_cleared_after_each_layer():
    calls = []
    renderer = Renderer(clear_depth=partial(calls.append, "clear"))
    renderer.add_draw(LayerType.BACK_GROUND, False, partial(calls.append, "bg"))
    renderer.add_draw(LayerType.DEBUG, False, partial(calls.append, "dbg1"))
    renderer.add_draw(LayerType.DEBUG, False, partial(calls.append, "dbg2"))
    renderer.draw()
    assert calls == ["bg", "clear", "dbg1", "dbg2", "clear"]


def test_queue_emptied_after_draw_but_layers_still_cleared():
    calls = []
    renderer = Renderer(clear_depth=partial(calls.append, "clear"))
    renderer.add_draw(LayerType.OBJECT, False, partial(calls.append, "obj"))
    renderer.draw()
    assert calls == ["obj", "clear"]
    renderer.draw()
    assert calls == ["obj", "clear", "clear"]


def test_off_screen_queue_is_separate():
    calls = []
    renderer = Renderer(
        clear_depth=partial(calls.append, "clear"),
        clear_off_screen_depth=partial(calls.append, "off_clear"),
    )
    renderer.add_draw(LayerType.OBJECT, True, partial(calls.append, "off"))
    renderer.add_draw(LayerType.OBJECT, False, partial(calls.append, "on"))
    renderer.off_screen_draw()
    assert calls == ["off", "off_clear"]
    renderer.draw()
    assert calls == ["off", "off_clear", "on", "clear"]


def test_draw_with_nothing_queued_calls_nothing():
    calls = []
    renderer = Renderer(
        clear_depth=partial(calls.append, "clear"),
        clear_off_screen_depth=partial(calls.append, "off_clear"),
    )
    renderer.draw()
    renderer.off_screen_draw()
    assert calls == []


def test_plain_int_layer_accepted_and_invalid_rejected():
    calls = []
    renderer = Renderer()
    renderer.add_draw(5, False, partial(calls.append, "last"))
    renderer.add_draw(0, False, partial(calls.append, "first"))
    renderer.draw()
    assert calls == ["first", "last"]
    with pytest.raises(ValueError):
        renderer.add_draw(42, False, partial(calls.append, "bad"))


def test_layer_order_matches_declaration():
    layers = [LayerType(value) for value in range(6)]
    assert layers == [
        LayerType.FIRST,
        LayerType.BACK_GROUND,
        LayerType.OBJECT,
        LayerType.DEBUG,
        LayerType.UI,
        LayerType.LAST,
    ]
    assert sorted(layers, reverse=True)[0] == LayerType.LAST