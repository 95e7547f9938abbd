"""Unit tests for the demonstration registry."""

from collections.abc import Generator
from io import StringIO

import pytest
from rich.console import Console

from src.app.references import registry
from src.app.references.console import render_all, render_demonstration
from src.app.references.registry import (
    Demonstration,
    UnknownDemonstrationError,
    demonstration,
    demonstrations,
    get_demonstration,
    run_demonstration,
    run_section,
    sections,
)

SCRATCH_SECTION = "scratch"


@pytest.fixture
def scratch_section() -> Generator[str, None, None]:
    """Register a throwaway section and remove it afterwards."""

    @demonstration(section=SCRATCH_SECTION, name="numbers", title="Numbers")
    def numbers(demo: Demonstration) -> None:
        """Record a few numbers."""
        values = [1, 2]
        demo.record("values", values)
        values.append(3)
        demo.record("count", len(values), note="after append")

    @demonstration(section=SCRATCH_SECTION, name="undocumented", title="Undocumented")
    def undocumented(demo: Demonstration) -> None:
        demo.record("text", "plain")

    yield SCRATCH_SECTION
    registry._REGISTRY.pop(SCRATCH_SECTION, None)


class TestDemonstration:
    """Test recording observations."""

    def test_record_returns_value(self):
        """record() should hand back the value it was given."""
        demo = Demonstration("section", "name", "title")
        value = {"a": 1}

        assert demo.record("value", value) is value

    def test_record_snapshots_containers(self):
        """Later mutations should not change the recorded value."""
        demo = Demonstration("section", "name", "title")
        items = [1]
        demo.record("items", items)
        items.append(2)

        assert demo["items"] == [1]

    def test_lookup(self):
        """Observations should be found by label."""
        demo = Demonstration("section", "name", "title")
        demo.record("first", 1)
        demo.record("second", 2, note="a note")

        assert demo.labels() == ["first", "second"]
        assert "second" in demo
        assert demo.observations[1].note == "a note"
        with pytest.raises(KeyError):
            demo["missing"]


class TestRegistry:
    """Test registration, lookup and running."""

    def test_known_sections(self):
        """The reference modules should be discovered."""
        assert {"collections", "features"} <= set(sections())

    def test_every_demonstration_listed(self):
        """Listing without a section should include both sections."""
        entries = demonstrations()

        assert len([e for e in entries if e.section in ("collections", "features")]) == 20

    def test_run_registered_function(self, scratch_section):
        """Running should return the recorded observations."""
        demo = run_demonstration(scratch_section, "numbers")

        assert demo.section == scratch_section
        assert demo.title == "Numbers"
        assert demo["values"] == [1, 2]
        assert demo["count"] == 3

    def test_run_section_in_registration_order(self, scratch_section):
        """A section should run in the order its functions were registered."""
        assert [demo.name for demo in run_section(scratch_section)] == ["numbers", "undocumented"]

    def test_summary(self, scratch_section):
        """The summary is the docstring's first line, or the title."""
        assert get_demonstration(scratch_section, "numbers").summary == "Record a few numbers."
        assert get_demonstration(scratch_section, "undocumented").summary == "Undocumented"

    def test_duplicate_registration(self, scratch_section):
        """A second function under the same name should be refused."""
        with pytest.raises(ValueError, match="already registered"):

            @demonstration(section=scratch_section, name="numbers", title="Again")
            def again(demo: Demonstration) -> None:
                pass

    def test_unknown_section(self):
        """An unknown section should raise with the known ones listed."""
        with pytest.raises(UnknownDemonstrationError) as exc_info:
            demonstrations("nope")

        assert "Unknown section 'nope'" in exc_info.value.args[0]
        assert "collections" in exc_info.value.args[0]

    def test_unknown_demonstration(self):
        """An unknown name should raise a KeyError subclass."""
        with pytest.raises(KeyError):
            get_demonstration("features", "nope")


class TestRendering:
    """Test the rich rendering of demonstrations."""

    def test_render_demonstration(self, scratch_section):
        """The rendered panel should contain labels, values and notes."""
        output = StringIO()
        target = Console(file=output, width=120, color_system=None)
        render_demonstration(run_demonstration(scratch_section, "numbers"), target)
        text = output.getvalue()

        assert "Numbers" in text
        assert "values" in text
        assert "after append" in text

    def test_render_all_counts(self, scratch_section):
        """render_all should return how many demonstrations were printed."""
        target = Console(file=StringIO(), width=120)

        assert render_all(run_section(scratch_section), target) == 2
