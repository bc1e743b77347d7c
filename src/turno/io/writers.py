from pathlib import Path
import json
from typing import Any

def atomic_write_json(obj: Any, out: Path, indent: int = 2) -> None:
    out = Path(out)
    out.parent.mkdir(parents=True, exist_ok=True)
    tmp = out.with_suffix(out.suffix + ".tmp")
    try:
        with open(tmp, "w", encoding="utf-8") as f:
            # strict JSON only: NaN/Infinity raise ValueError
            json.dump(obj, f, indent=indent, ensure_ascii=False, allow_nan=False)
    except Exception:
        tmp.unlink(missing_ok=True)
        raise
    tmp.replace(out)             # atomic replace on same filesystem
