"""Report builder — text and JSON output for rgb-tool results."""

import json
from typing import Any

from rgb_tool.core.types import Report


def _swatch_line(data: dict[str, Any]) -> str:
    return f'{data["hex"]}  R={data["r"]} G={data["g"]} B={data["b"]} A={data["a"]}'


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = []
    if report.colour is not None:
        lines.append(f'rgb-tool: {report.source} → {report.colour.to_hex()}')
    else:
        lines.append(f'rgb-tool: {report.source}')
    lines.append('')

    for op_name, data in report.results.items():
        if op_name == 'info':
            lines.append('── info')
            lines.append(f'  {_swatch_line(data)}')
            lines.append(f'  luminance: {data["luminance"]}')
        elif op_name in ('lighten', 'darken', 'opacify'):
            lines.append(f'── {op_name} ({data["factor"]})')
            lines.append(f'  {_swatch_line(data["result"])}')
        elif op_name == 'grayscale':
            lines.append('── grayscale')
            lines.append(f'  {_swatch_line(data["result"])}')
        elif op_name == 'palette':
            lines.append(f'── palette {data["name"]} ({len(data["colours"])} colours)')
            for entry in data['colours']:
                lines.append(f'  {entry["name"]:<10} {entry["hex"]}')
        elif op_name == 'swatch':
            lines.append('── swatch')
            lines.append(f'  file: {data["file"]} ({data["width"]}×{data["height"]})')
        else:
            # Generic fallback
            lines.append(f'── {op_name}')
            for k, v in data.items():
                lines.append(f'  {op_name}.{k}: {v}')
        lines.append('')

    return '\n'.join(lines).rstrip('\n')


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {'input': report.source}
    if report.colour is not None:
        obj['colour'] = report.colour.to_hex()
    obj['operations'] = [{'name': name, **data} for name, data in report.results.items()]
    return json.dumps(obj, indent=2)
