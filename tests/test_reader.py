import pytest

from api_console.console.models import ParameterEntry
from api_console.console.reader import entries_for, parse_label, read_descriptors
from api_console.docs.base import ApiEndpoint, Param, ParameterLocation
from api_console.errors import UnknownLocation


class TestParseLabel:
    @pytest.mark.parametrize("location", ["query", "path", "body", "header"])
    def test_known_locations(self, location):
        assert parse_label(f"my_param ({location})") == ("my_param", ParameterLocation(location))

    def test_location_is_lower_cased(self):
        assert parse_label("X-Api-Key (HEADER)") == ("X-Api-Key", ParameterLocation.HEADER)

    def test_first_parenthesized_group_wins(self):
        assert parse_label("ttl (query) (time)") == ("ttl", ParameterLocation.QUERY)

    def test_unknown_location(self):
        with pytest.raises(UnknownLocation) as exc_info:
            parse_label("session (cookie)")
        assert exc_info.value.value == "cookie"

    def test_missing_location(self):
        with pytest.raises(UnknownLocation):
            parse_label("session")


class TestReadDescriptors:
    def test_reads_in_order(self):
        descriptors = read_descriptors([
            ParameterEntry(label="key (path)", value="abc"),
            ParameterEntry(label="ttl (query)", value="3h"),
        ])
        assert [(d.name, d.location, d.raw_value) for d in descriptors] == [
            ("key", ParameterLocation.PATH, "abc"),
            ("ttl", ParameterLocation.QUERY, "3h"),
        ]

    def test_skips_incomplete_entries(self):
        descriptors = read_descriptors([
            ParameterEntry(label=None, value="orphan"),
            ParameterEntry(label="ttl (query)", value=None),
            ParameterEntry(label="len (query)", value=""),
        ])
        assert len(descriptors) == 1
        assert descriptors[0].name == "len"
        assert descriptors[0].raw_value == ""

    def test_unknown_location_is_reported(self):
        with pytest.raises(UnknownLocation):
            read_descriptors([ParameterEntry(label="id (form)", value="1")])


class TestEntriesFor:
    def test_values_override_defaults(self):
        endpoint = ApiEndpoint(
            id="create-record",
            method="POST",
            path="/",
            parameters=[
                Param(name="ttl", location="query", default="24h"),
                Param(name="len", location="query", default="14"),
                Param(name="body", location="body"),
            ],
        )
        entries = entries_for(endpoint, {"ttl": "3h", "body": "hello"})
        assert [(e.label, e.value) for e in entries] == [
            ("ttl (query)", "3h"),
            ("len (query)", "14"),
            ("body (body)", "hello"),
        ]
