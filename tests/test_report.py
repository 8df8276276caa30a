"""Tests for rgb_tool.core.report — text and JSON formatting."""

import json

from rgb_tool.core.color import Color
from rgb_tool.core.report import format_json, format_text
from rgb_tool.core.types import Report, describe

BLUE = Color.from_channels(13, 110, 253)


def _report() -> Report:
    report = Report(source='bs.blue', colour=BLUE)
    report.add('info', {**describe(BLUE), 'luminance': 97})
    report.add('lighten', {'factor': 0.5, 'result': describe(BLUE.lighten(0.5))})
    report.add('grayscale', {'result': describe(BLUE.grayscale())})
    return report


class TestDescribe:
    def test_fields(self) -> None:
        assert describe(BLUE) == {'hex': '#0D6EFDFF', 'r': 13, 'g': 110, 'b': 253, 'a': 255}


class TestReport:
    def test_add_replaces(self) -> None:
        report = Report()
        report.add('x', {'a': 1})
        report.add('x', {'a': 2})
        assert report.results == {'x': {'a': 2}}


class TestFormatText:
    def test_header(self) -> None:
        text = format_text(_report())
        assert text.splitlines()[0] == 'rgb-tool: bs.blue → #0D6EFDFF'

    def test_sections(self) -> None:
        text = format_text(_report())
        assert '── info' in text
        assert 'luminance: 97' in text
        assert '── lighten (0.5)' in text
        assert '#86B6FEFF  R=134 G=182 B=254 A=255' in text
        assert '── grayscale' in text

    def test_palette_section(self) -> None:
        report = Report(source='bs')
        report.add('palette', {'name': 'bs', 'colours': [{'name': 'blue', 'hex': '#0D6EFDFF'}]})
        text = format_text(report)
        assert text.splitlines()[0] == 'rgb-tool: bs'
        assert '── palette bs (1 colours)' in text
        assert 'blue' in text and '#0D6EFDFF' in text

    def test_generic_fallback(self) -> None:
        report = Report(source='x', colour=BLUE)
        report.add('custom', {'k': 'v'})
        assert 'custom.k: v' in format_text(report)


class TestFormatJson:
    def test_structure(self) -> None:
        obj = json.loads(format_json(_report()))
        assert obj['input'] == 'bs.blue'
        assert obj['colour'] == '#0D6EFDFF'
        names = [op['name'] for op in obj['operations']]
        assert names == ['info', 'lighten', 'grayscale']
        assert obj['operations'][1]['result']['hex'] == '#86B6FEFF'

    def test_no_colour(self) -> None:
        obj = json.loads(format_json(Report(source='basic')))
        assert 'colour' not in obj
        assert obj['operations'] == []
