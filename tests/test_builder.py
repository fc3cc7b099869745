"""
Tests for the PersonBuilder custom constructors
"""

import pytest

from person_registry.core.builder import PersonBuilder
from person_registry.entities.person import Person
from person_registry.exceptions import MalformedRecordError


class TestPersonBuilder:
    """Test building tracked people"""

    def test_create_from_text(self, registry, builder, founders_text):
        """Test three records become three tracked people, in order"""
        people = builder.create_from_text(founders_text)

        assert [p.as_record() for p in people] == [
            ("Elon Musk", "45", "Tesla"),
            ("Mark Zuckerberg", "32", "Facebook"),
            ("Martha Stewart", "74", "MSL"),
        ]
        assert registry.all() == people
        assert all(a is b for a, b in zip(registry.all(), people))

    def test_create_from_text_appends(self, registry, builder, founders_text):
        """Test new people land after the ones already tracked"""
        grace = registry.create("Grace Hopper")
        people = builder.create_from_text(founders_text)

        assert registry.all() == [grace] + people

    def test_create_from_text_returns_only_new_people(self, registry, builder):
        registry.create("Grace Hopper")
        people = builder.create_from_text("Sandi Metz, 60, Practical")

        assert [p.name for p in people] == ["Sandi Metz"]

    def test_malformed_input_leaves_registry_untouched(self, registry, builder):
        """Test nothing is created when a later record is bad"""
        with pytest.raises(MalformedRecordError):
            builder.create_from_text("Elon Musk, 45, Tesla\nbroken")

        assert registry.all() == []

    def test_skip_policy(self, registry):
        builder = PersonBuilder(registry, policy="skip")
        people = builder.create_from_text("Elon Musk, 45, Tesla\nbroken\nMartha Stewart, 74, MSL")

        assert [p.name for p in people] == ["Elon Musk", "Martha Stewart"]
        assert len(registry) == 2

    def test_pad_policy(self, registry):
        builder = PersonBuilder(registry, policy="pad")
        (grace,) = builder.create_from_text("Grace Hopper")

        assert grace == Person(name="Grace Hopper")
        assert registry.find_by_name("Grace Hopper") is grace

    def test_build_does_not_track(self, registry, builder):
        """Test build() only constructs"""
        person = builder.build("Grace Hopper", "85", "Navy")

        assert person.company == "Navy"
        assert registry.all() == []

    def test_create_tracks(self, registry, builder):
        person = builder.create("Grace Hopper", "85", "Navy")
        assert registry.all() == [person]

    def test_create_from_file(self, registry, builder, founders_file):
        """Test reading records from disk"""
        people = builder.create_from_file(founders_file)

        assert len(people) == 3
        assert registry.find_by_name("Mark Zuckerberg").company == "Facebook"

    def test_create_from_missing_file(self, builder, tmp_path):
        with pytest.raises(FileNotFoundError):
            builder.create_from_file(tmp_path / "missing.txt")

    def test_file_errors_name_the_file(self, builder, tmp_path):
        path = tmp_path / "bad.txt"
        path.write_text("Elon Musk, 45, Tesla\n\nbroken\n", encoding="utf-8")

        with pytest.raises(MalformedRecordError) as exc_info:
            builder.create_from_file(path)

        assert exc_info.value.line_number == 3
        assert str(path) in str(exc_info.value)
