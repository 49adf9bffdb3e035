"""Tests for the structured log renderer."""

from sequencer.logging import SequencerRenderer


class TestSequencerRenderer:
    """Tests for SequencerRenderer."""

    def test_plain_line(self) -> None:
        renderer = SequencerRenderer(colors=False)
        line = renderer(
            None,
            "warning",
            {
                "event": "circular_dependencies_detected",
                "level": "warning",
                "timestamp": "12:00:00",
                "count": 3,
            },
        )
        assert line == "sequencer | 12:00:00 | warning | circular_dependencies_detected count=3"

    def test_private_keys_hidden(self) -> None:
        renderer = SequencerRenderer(service_name="cli", colors=False)
        line = renderer(None, "info", {"event": "x", "timestamp": "t", "_record": object()})
        assert line == "cli | t | info    | x"

    def test_colors(self) -> None:
        renderer = SequencerRenderer(colors=True)
        line = renderer(None, "info", {"event": "x", "timestamp": "t", "n": 1})
        assert "\033[" in line
        assert "x" in line
