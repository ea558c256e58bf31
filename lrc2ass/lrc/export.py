from __future__ import annotations

import json

from .model import Lyrics


def export_json(lyrics: Lyrics) -> str:
    return json.dumps(
        {
            "lines": list(lyrics.lines),
            "timings": [
                {
                    "t_ms": t.time_ms,
                    "duration_ms": t.duration_ms,
                    "line": t.line_index,
                    "from": t.char_from,
                    "to": t.char_to,
                }
                for t in lyrics.timings
            ],
        },
        ensure_ascii=False,
        indent=2,
    )
