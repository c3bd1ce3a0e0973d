from pathlib import Path
import json

from .exceptions import LoadError


def prepare_dirs(cfg):
    Path(cfg["out_dir"], "figs").mkdir(parents=True, exist_ok=True)


def write_jsonl(records, name, cfg):
    path = Path(cfg["out_dir"], name)
    with open(path, "w", encoding="utf-8") as f:
        for record in records:
            f.write(json.dumps(record, ensure_ascii=False) + "\n")
    return path


def to_number(source, key, value):
    # bool is an int subclass but "true" is not a weight
    if isinstance(value, bool):
        raise LoadError(f"{source}: value for {key!r} is not a number", source,
                        {"key": key, "value": repr(value)})
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise LoadError(f"{source}: value for {key!r} is not a number", source,
                        {"key": key, "value": repr(value)}) from e


def read_json_mapping(path) -> dict[str, float]:
    """Read a flat ``{"phrase": number}`` JSON object."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise LoadError(f"dictionary not found: {path}", str(path)) from e
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
        raise LoadError(f"cannot read {path}: {e}", str(path)) from e

    if not isinstance(data, dict):
        raise LoadError(f"{path}: expected a JSON object, got {type(data).__name__}",
                        str(path))
    return {str(k): to_number(str(path), k, v) for k, v in data.items()}


def read_tsv_mapping(path) -> dict[str, float]:
    """Read ``phrase<TAB>number`` lines; blank lines and ``#`` comments are skipped."""
    path = Path(path)
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except FileNotFoundError as e:
        raise LoadError(f"dictionary not found: {path}", str(path)) from e
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(f"cannot read {path}: {e}", str(path)) from e

    mapping = {}
    for lineno, line in enumerate(lines, 1):
        if not line.strip() or line.lstrip().startswith("#"):
            continue
        parts = line.rstrip("\r\n").split("\t")
        if len(parts) != 2 or not parts[0].strip():
            raise LoadError(f"{path}:{lineno}: expected 'phrase<TAB>value'", str(path),
                            {"line": lineno})
        key = parts[0].strip()
        mapping[key] = to_number(f"{path}:{lineno}", key, parts[1].strip())
    return mapping
