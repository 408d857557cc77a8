import pytest

from NetworkVisualizer.core import Network
from NetworkVisualizer.errors import SurfaceFailure
from NetworkVisualizer.layout import circle_pixels
from NetworkVisualizer.renderer import NetworkRenderer

from conftest import RecordingSurface


def test_frame_order_clear_lines_points_present(recording_surface):
    NetworkRenderer(recording_surface).render(Network.from_sizes([2, 3, 1]))
    names = [c[0] for c in recording_surface.calls if c[0] != "set_draw_color"]
    assert names[0] == "clear"
    assert names[-1] == "present"
    first_point = names.index("draw_point")
    assert all(n == "draw_line" for n in names[1:first_point])
    assert all(n == "draw_point" for n in names[first_point:-1])


def test_background_and_synapse_colors(recording_surface):
    NetworkRenderer(recording_surface).render(Network.from_sizes([2, 3, 1]))
    assert recording_surface.named("clear") == [("clear", (20, 40, 50, 255))]
    lines = recording_surface.named("draw_line")
    assert len(lines) == 9
    assert all(line[-1] == (0x55, 0x55, 0x55, 80) for line in lines)
    assert ("draw_line", 50, 37, 150, 25, (0x55, 0x55, 0x55, 80)) in lines


def test_neurons_are_filled_circles(recording_surface):
    layout = NetworkRenderer(recording_surface).render(Network.from_sizes([2, 3, 1]))
    points = recording_surface.named("draw_point")
    expected = sum(len(circle_pixels(0, 0, n.radius)) for n in layout.neurons)
    assert len(points) == expected
    assert all(p[-1] == (10, 10, 138, 255) for p in points)
    assert ("draw_point", 250, 75, (10, 10, 138, 255)) in points


def test_two_renders_issue_identical_calls():
    net = Network.from_sizes([3, 2], fill=4.2)
    a, b = RecordingSurface(), RecordingSurface()
    NetworkRenderer(a).render(net)
    NetworkRenderer(b).render(net)
    assert a.calls == b.calls


def test_activation_change_between_frames_changes_colors(recording_surface):
    renderer = NetworkRenderer(recording_surface)
    net = Network.from_sizes([1], fill=-10.0)
    first = renderer.render(net)
    net.set_activations(0, [10.0])
    second = renderer.render(net)
    assert first.neurons[0].color == (20, 20, 20, 255)
    assert second.neurons[0].color == (0, 0, 255, 255)
    assert renderer.last_layout is second


def test_surface_failure_propagates_unchanged():
    surface = RecordingSurface(fail_on="draw_line")
    renderer = NetworkRenderer(surface)
    with pytest.raises(SurfaceFailure, match="draw_line failed"):
        renderer.render(Network.from_sizes([2, 2]))
    assert surface.named("present") == []
    assert renderer.last_layout is None
