"""Tests for the flat-file line codec."""

from app.infrastructure.persistence.record_codec import (
    FILE_HEADER,
    decode_record,
    encode_record,
    parse_document,
    render_document,
)


class TestRecordCodec:
    def test_encode_record_uses_comment_line_format(self, make_record):
        record = make_record()

        assert encode_record(record) == (
            "# API_KEY_a1b2c3d4e5f6=Primary|openai|abcdef1234567890|2024-05-01T12:00:00.000Z"
        )

    def test_render_document_appends_materialized_lines(self, make_record):
        records = [
            make_record(),
            make_record(id="ffee00112233", name="Search", service="pplx", key="0123456789abcdef"),
        ]

        lines = render_document(records).splitlines()

        assert lines[0] == FILE_HEADER
        assert lines[1].startswith("# API_KEY_a1b2c3d4e5f6=")
        assert lines[2].startswith("# API_KEY_ffee00112233=")
        assert lines[3:] == [
            "OPENAI_API_KEY=abcdef1234567890",
            "PERPLEXITY_API_KEY=0123456789abcdef",
        ]

    def test_render_empty_document_is_header_only(self):
        assert render_document([]) == FILE_HEADER + "\n"

    def test_parse_round_trips_records(self, make_record):
        records = [
            make_record(id=f"id{index:04d}", name=f"Key {index}", service=f"svc{index}", key=f"{index:064x}")
            for index in range(5)
        ]

        parsed = parse_document(render_document(records))

        assert parsed == records

    def test_parse_ignores_header_assignments_and_noise(self):
        text = "\n".join(
            [
                "# API Keys",
                "",
                "# some operator note",
                "# API_KEY_abc123=Maps|mapbox|deadbeefcafe0000|2024-01-01T00:00:00Z",
                "# API_KEY_bad id=Broken|x|y|z",
                "# API_KEY_missing=fields|only",
                "MAPBOX_API_KEY=deadbeefcafe0000",
            ]
        )

        parsed = parse_document(text)

        assert len(parsed) == 1
        assert parsed[0].id == "abc123"
        assert parsed[0].service == "mapbox"
        assert parsed[0].created_at == "2024-01-01T00:00:00Z"

    def test_decode_accepts_crlf_line_endings(self):
        record = decode_record("# API_KEY_abc-123=Listings|mls|0011223344556677|2024-01-01T00:00:00Z\r")

        assert record is not None
        assert record.id == "abc-123"
        assert record.created_at == "2024-01-01T00:00:00Z"

    def test_decode_returns_none_for_materialized_line(self):
        assert decode_record("OPENAI_API_KEY=abcdef1234567890") is None
