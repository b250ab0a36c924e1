from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys

# ---- sys.path bootstrap (Windows-friendly) ----
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))
# ---------------------------------------------

from room.core.codec import report_to_data  # noqa: E402
from room.core.config import load_config  # noqa: E402
from room.core.errors import ScenarioError  # noqa: E402
from room.core.scenario import load_scenario, load_scenarios, run_scenario  # noqa: E402


def _print_report(name: str, report) -> None:
    status = "PASS" if report.ok else "FAIL"
    print(f"{status}  {name}")
    for s in report.steps:
        if not s.satisfied:
            want = "ok" if s.expect_ok else "rejected"
            print(f"      step {s.index}: {s.action} expected {want}, got {s.verdict.code.value}: {s.verdict.message}")
    for e in report.expectations:
        if not e.satisfied:
            print(f"      expectation: {e.message}")


def main(argv=None) -> int:
    cfg = load_config()
    logging.basicConfig(level=getattr(logging, cfg.log_level, logging.INFO), format="%(levelname)s %(name)s: %(message)s")

    ap = argparse.ArgumentParser(description="Run room scenarios and report goal failures.")
    ap.add_argument("paths", nargs="*", help="Scenario files (default: every scenario in --dir)")
    ap.add_argument("--dir", default=str(cfg.scenario_dir), help="Scenario directory (default ROOM_SCENARIO_DIR)")
    ap.add_argument("--json", action="store_true", help="Print full reports as JSON")
    args = ap.parse_args(argv)

    try:
        if args.paths:
            scenarios = [load_scenario(Path(p)) for p in args.paths]
        else:
            scenarios = load_scenarios(Path(args.dir))
    except ScenarioError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    if not scenarios:
        print("ERROR: no scenarios found.", file=sys.stderr)
        return 2

    failed = 0
    out = []
    for s in scenarios:
        report = run_scenario(s)
        failed += 0 if report.ok else 1
        if args.json:
            out.append({"name": s.name, **report_to_data(report)})
        else:
            _print_report(s.name, report)

    if args.json:
        print(json.dumps(out, indent=2))
    else:
        print(f"{len(scenarios) - failed}/{len(scenarios)} scenarios passed.")
    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
