import argparse
import json
import os
import sys
from collections import namedtuple
from pathlib import Path

from small_prime import first_divisor, is_small_prime

DEFAULT_GOLDEN_DIR = Path(__file__).resolve().parent / "golden"
DEFAULT_ENTRY_FUNC = "is_small_prime"
INPUTS_FILE = "inputs.json"
EXPECTED_FILE = "expected"

# "main" is accepted as an alias for is_small_prime
ENTRY_POINTS = {
    "is_small_prime": is_small_prime,
    "main": is_small_prime,
    "first_divisor": first_divisor,
}

CaseResult = namedtuple("CaseResult", ["name", "passed", "actual", "expected"])


def golden_dir_from_env() -> Path:
    """Case root: GOLDEN_DIR if set, otherwise golden/ next to this file."""
    value = os.environ.get("GOLDEN_DIR")
    return Path(value) if value else DEFAULT_GOLDEN_DIR


def load_config(golden_dir) -> dict:
    """Load config.json from the case root, or {} when there is none."""
    path = Path(golden_dir) / "config.json"
    if not path.exists():
        return {}
    with open(path, "r") as f:
        config = json.load(f)
    if not isinstance(config, dict):
        raise ValueError(f"Golden config must be a JSON object: {path}")
    return config


def entry_func_name(config: dict) -> str:
    """GOLDEN_ENTRY_FUNC overrides config["entry_func"], which overrides the default."""
    return os.environ.get("GOLDEN_ENTRY_FUNC") or config.get("entry_func") or DEFAULT_ENTRY_FUNC


def resolve_entry(name: str):
    if not isinstance(name, str):
        raise ValueError(f"Entry function name must be a string, got {name!r}")
    if name in ENTRY_POINTS:
        return ENTRY_POINTS[name]
    raise ValueError(
        f"Unknown entry function '{name}'. Known: {', '.join(sorted(ENTRY_POINTS))}"
    )


def find_cases(golden_dir) -> list:
    """Return the case directories under golden_dir, sorted by name."""
    root = Path(golden_dir)
    if not root.is_dir():
        return []
    return sorted(p for p in root.iterdir() if p.is_dir() and (p / INPUTS_FILE).exists())


def load_inputs(case_dir) -> list:
    """
    Read the recorded inputs of a case.

    Args:
        case_dir: Directory containing inputs.json

    Returns:
        The list of integer inputs
    """
    path = Path(case_dir) / INPUTS_FILE
    with open(path, "r") as f:
        inputs = json.load(f)

    if not isinstance(inputs, list) or not all(
        isinstance(x, int) and not isinstance(x, bool) for x in inputs
    ):
        raise ValueError(f"{path} must contain a JSON list of integers")
    return inputs


def render_case(entry_name: str, func, inputs) -> str:
    """Render one `<entry>(<a>) = <result>` line per input."""
    return "".join(f"{entry_name}({a}) = {func(a)}\n" for a in inputs)


def load_expected(case_dir):
    path = Path(case_dir) / EXPECTED_FILE
    if not path.exists():
        return None
    with open(path, "r") as f:
        return f.read()


def run_case(case_dir, entry_name: str) -> CaseResult:
    case_dir = Path(case_dir)
    func = resolve_entry(entry_name)
    actual = render_case(entry_name, func, load_inputs(case_dir))
    expected = load_expected(case_dir)
    return CaseResult(case_dir.name, expected is not None and actual == expected, actual, expected)


def rebuild_case(case_dir, entry_name: str) -> str:
    """Regenerate the expected file of a case and return its new contents."""
    case_dir = Path(case_dir)
    func = resolve_entry(entry_name)
    output = render_case(entry_name, func, load_inputs(case_dir))
    with open(case_dir / EXPECTED_FILE, "w") as f:
        f.write(output)
    return output


def select_cases(golden_dir, name=None) -> list:
    cases = find_cases(golden_dir)
    if name is None:
        return cases
    selected = [c for c in cases if c.name == name]
    if not selected:
        raise ValueError(f"No golden case named '{name}' in {golden_dir}")
    return selected


def run_all(golden_dir, entry_name: str, name=None) -> list:
    results = []
    for case_dir in select_cases(golden_dir, name):
        result = run_case(case_dir, entry_name)
        print(f"Running test case '{result.name}': {'OK' if result.passed else 'FAIL'}")
        if result.expected is None:
            print(f"ℹ️  No {EXPECTED_FILE} file in {case_dir} (run with --rebuild)")
        results.append(result)
    return results


def rebuild_all(golden_dir, entry_name: str, name=None) -> list:
    rebuilt = []
    for case_dir in select_cases(golden_dir, name):
        rebuild_case(case_dir, entry_name)
        print(f"✅ Rebuilt {case_dir / EXPECTED_FILE}")
        rebuilt.append(case_dir.name)
    return rebuilt


def main(argv=None):
    parser = argparse.ArgumentParser(description="Golden output runner")
    parser.add_argument("case", nargs="?", help="Specific golden case to run")
    parser.add_argument("--dir", help="Golden case root (default: $GOLDEN_DIR or ./golden)")
    parser.add_argument("--entry", help="Entry function (default: $GOLDEN_ENTRY_FUNC or config.json)")
    parser.add_argument("--rebuild", action="store_true", help="Regenerate expected files")
    parser.add_argument("--list", action="store_true", help="List golden cases")
    args = parser.parse_args(argv)

    golden_dir = Path(args.dir) if args.dir else golden_dir_from_env()

    if args.list:
        for case_dir in find_cases(golden_dir):
            print(case_dir.name)
        return 0

    try:
        entry_name = args.entry or entry_func_name(load_config(golden_dir))
        resolve_entry(entry_name)
        if args.rebuild:
            rebuild_all(golden_dir, entry_name, args.case)
            return 0
        results = run_all(golden_dir, entry_name, args.case)
    except ValueError as e:
        print(f"❌ {e}")
        return 1

    if not results:
        print(f"ℹ️  No golden cases found in {golden_dir}")
        return 0

    failed = [r.name for r in results if not r.passed]
    if failed:
        print(f"❌ {len(failed)}/{len(results)} golden cases failed: {', '.join(failed)}")
        return 1

    print(f"✅ All {len(results)} golden cases passed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
