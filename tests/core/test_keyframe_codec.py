"""Tests for koshi_keyframes.kdenlive.core.keyframe -- keyframe text and track records.

Covers:
  - format_number / encode_entries: Kdenlive value text
  - decode_entries: splitting, whitespace, malformed input
  - encode_track / decode_track: record fields, unknown names, validation
  - dumps_tracks / loads_tracks: JSON array layer
"""

import json
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

import pytest

from koshi_keyframes.kdenlive.core.exceptions import KeyframeError, MalformedKeyframeText
from koshi_keyframes.kdenlive.core.keyframe import (
    RECT_TYPE,
    ROTATION_TYPE,
    TRACK_FIELDS,
    EffectTrack,
    KeyframeEntry,
    decode_entries,
    decode_entry,
    decode_track,
    dumps_tracks,
    encode_entries,
    encode_track,
    format_number,
    loads_tracks,
)


# -----------------------------------------------------------------------
# format_number
# -----------------------------------------------------------------------

class TestFormatNumber:

    @pytest.mark.parametrize("value,expected", [
        (0.0, "0"),
        (1920.0, "1920"),
        (-90.0, "-90"),
        (1.0, "1"),
        (0.5, "0.5"),
        (-12.25, "-12.25"),
        (7, "7"),
        (True, "1"),
    ])
    def test_format(self, value, expected):
        assert format_number(value) == expected

    @pytest.mark.parametrize("value", [0.1, 1 / 3, 2.675, 1e-7, 123456.789])
    def test_shortest_repr_parses_back(self, value):
        assert float(format_number(value)) == value


# -----------------------------------------------------------------------
# encode_entries
# -----------------------------------------------------------------------

class TestEncodeEntries:

    def test_single_rect_entry(self):
        entry = KeyframeEntry(frame=0, values=(0.0, 0.0, 1920.0, 1080.0, 1.0))
        assert encode_entries([entry]) == "0 = 0 0 1920 1080 1"

    def test_entries_joined_by_semicolon(self):
        entries = [
            KeyframeEntry(frame=0, values=(-90.0,)),
            KeyframeEntry(frame=30, values=(0.0,)),
        ]
        assert encode_entries(entries) == "0 = -90;30 = 0"

    def test_fractional_values(self):
        entry = KeyframeEntry(frame=3, values=(12.5, 0.25))
        assert encode_entries([entry]) == "3 = 12.5 0.25"

    def test_empty(self):
        assert encode_entries([]) == ""


# -----------------------------------------------------------------------
# decode_entries
# -----------------------------------------------------------------------

class TestDecodeEntries:

    def test_basic(self):
        entries = decode_entries("0 = 0 0 1920 1080 1;1 = 20 0 1920 1080 1")
        assert entries == [
            KeyframeEntry(frame=0, values=(0.0, 0.0, 1920.0, 1080.0, 1.0)),
            KeyframeEntry(frame=1, values=(20.0, 0.0, 1920.0, 1080.0, 1.0)),
        ]

    def test_whitespace_variations(self):
        entries = decode_entries("  0=1   2 ;  5 =3\t4  ")
        assert entries == [
            KeyframeEntry(frame=0, values=(1.0, 2.0)),
            KeyframeEntry(frame=5, values=(3.0, 4.0)),
        ]

    def test_trailing_semicolon_skipped(self):
        assert len(decode_entries("0 = 1;1 = 2;")) == 2

    def test_values_are_floats_not_truncated(self):
        (entry,) = decode_entries("4 = 0.75 -12.5 1e-3")
        assert entry.values == (0.75, -12.5, 0.001)

    def test_mixed_arity_accepted(self):
        entries = decode_entries("0 = 1 2 3;1 = 4")
        assert [len(e.values) for e in entries] == [3, 1]

    def test_entry_without_values(self):
        assert decode_entry("7 = ") == KeyframeEntry(frame=7, values=())

    def test_empty_string(self):
        assert decode_entries("") == []

    def test_splits_on_first_equals_only(self):
        with pytest.raises(MalformedKeyframeText):
            decode_entries("0 = 1 = 2")

    @pytest.mark.parametrize("text", [
        "hello world",
        "x = 1 2",
        "0 = a b",
        "1.5 = 3",
        "0 = 1;garbage",
    ])
    def test_malformed(self, text):
        with pytest.raises(MalformedKeyframeText):
            decode_entries(text)

    def test_malformed_is_keyframe_error(self):
        with pytest.raises(KeyframeError):
            decode_entries("nope")

    def test_non_string_rejected(self):
        with pytest.raises(MalformedKeyframeText):
            decode_entries(42)

    def test_numeric_round_trip(self):
        entries = [
            KeyframeEntry(frame=i, values=(i / 7, -i * 1.1, 1920.0, 1080.0, (10 - i) / 10))
            for i in range(10)
        ]
        assert decode_entries(encode_entries(entries)) == entries


# -----------------------------------------------------------------------
# Track records
# -----------------------------------------------------------------------

class TestEncodeTrack:

    def test_field_order(self):
        track = EffectTrack(name="rect", entries=[KeyframeEntry(0, (1.0,))])
        assert tuple(encode_track(track).keys()) == TRACK_FIELDS

    def test_rotation_record(self):
        track = EffectTrack(
            name="rotation",
            display_name="Rotation",
            frame_in=0,
            frame_out=30,
            domain_min=-360,
            domain_max=360,
            kind=ROTATION_TYPE,
            entries=[KeyframeEntry(0, (-90.0,)), KeyframeEntry(30, (0.0,))],
        )
        assert encode_track(track) == {
            "DisplayName": "Rotation",
            "name": "rotation",
            "in": 0,
            "out": 30,
            "max": 360,
            "min": -360,
            "opacity": True,
            "type": 9,
            "value": "0 = -90;30 = 0",
        }


class TestDecodeTrack:

    def test_rect_record(self, rect_record):
        track = decode_track(rect_record)
        assert track.name == "rect"
        assert track.display_name == "Transform"
        assert track.kind == RECT_TYPE
        assert (track.frame_in, track.frame_out) == (0, 2)
        assert len(track.entries) == 3
        assert track.entries[1].values == (50.0, 25.0, 1920.0, 1080.0, 0.5)

    def test_unknown_name_and_type_round_trip(self):
        record = {
            "DisplayName": "Blur",
            "name": "av.sigma",
            "in": 5,
            "out": 40,
            "max": 100,
            "min": 0,
            "opacity": True,
            "type": 3,
            "value": "5 = 0;40 = 12.5",
        }
        assert encode_track(decode_track(record)) == record

    def test_opacity_false_accepted(self, rect_record):
        rect_record["opacity"] = False
        assert decode_track(rect_record).name == "rect"

    @pytest.mark.parametrize("field", TRACK_FIELDS)
    def test_missing_field(self, rect_record, field):
        del rect_record[field]
        with pytest.raises(MalformedKeyframeText):
            decode_track(rect_record)

    @pytest.mark.parametrize("field,value", [
        ("name", 7),
        ("DisplayName", None),
        ("in", "0"),
        ("out", True),
        ("type", "7"),
        ("opacity", 1),
        ("value", ["0 = 1"]),
    ])
    def test_wrong_field_type(self, rect_record, field, value):
        rect_record[field] = value
        with pytest.raises(MalformedKeyframeText):
            decode_track(rect_record)

    def test_bad_value_text(self, rect_record):
        rect_record["value"] = "0 = one two"
        with pytest.raises(MalformedKeyframeText):
            decode_track(rect_record)

    def test_not_a_dict(self):
        with pytest.raises(MalformedKeyframeText):
            decode_track(["rect"])


# -----------------------------------------------------------------------
# JSON array layer
# -----------------------------------------------------------------------

class TestJsonTracks:

    def test_dumps_is_json_array(self):
        track = EffectTrack(name="rect", entries=[KeyframeEntry(0, (1.0, 2.0))])
        data = json.loads(dumps_tracks([track]))
        assert isinstance(data, list)
        assert data[0]["value"] == "0 = 1 2"

    def test_dumps_indent(self):
        track = EffectTrack(name="rect")
        assert "\n  " in dumps_tracks([track], indent=2)
        assert "\n" not in dumps_tracks([track], indent=None)

    def test_loads(self, rect_record):
        tracks = loads_tracks(json.dumps([rect_record, rect_record]))
        assert len(tracks) == 2
        assert tracks[0].entries == tracks[1].entries

    def test_loads_round_trip(self, rect_record):
        text = json.dumps([rect_record])
        assert json.loads(dumps_tracks(loads_tracks(text))) == [rect_record]

    @pytest.mark.parametrize("text", [
        "",
        "not json",
        '{"name": "rect"}',
        "[1, 2]",
        '[{"name": "rect"}]',
    ])
    def test_loads_malformed(self, text):
        with pytest.raises(MalformedKeyframeText):
            loads_tracks(text)
