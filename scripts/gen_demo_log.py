"""Generate a realistic GitLab-style CI job log for trying out the viewer."""

# ruff: noqa: S311, PLR2004, T201
from __future__ import annotations

import random
import sys
from datetime import UTC, datetime, timedelta

GREEN = "\x1b[32;1m"
RED = "\x1b[31;1m"
CYAN = "\x1b[36;1m"
YELLOW = "\x1b[33m"
RESET = "\x1b[0;m"
ERASE = "\x1b[0K"


def ts_prefix(ts: datetime) -> str:
    return ts.isoformat(timespec="microseconds").replace("+00:00", "Z") + " "


def section(ts: datetime, name: str, title: str, *, start: bool) -> str:
    marker = "section_start" if start else "section_end"
    header = f"{CYAN}{title}{RESET}" if start else ""
    return f"{marker}:{int(ts.timestamp())}:{name}\r{ERASE}{header}"


def main() -> None:
    fail = len(sys.argv) > 1 and sys.argv[1] == "fail"
    ts = datetime.now(tz=UTC) - timedelta(minutes=10)
    lines: list[str] = ["\x00" f"0E{GREEN}Running with gitlab-runner 16.8.0{RESET}"]

    steps = [
        ("prepare_executor", "Preparing the \"docker\" executor", ["Using docker image python:3.12"]),
        ("get_sources", "Getting source from Git repository", ["Fetching changes with git depth set to 20..."]),
        ("step_script", "Executing \"step_script\" stage of the job script", []),
    ]
    for name, title, body in steps:
        ts += timedelta(seconds=random.uniform(0.5, 3))
        lines.append(section(ts, name, title, start=True))
        for text in body:
            ts += timedelta(milliseconds=random.randint(10, 900))
            lines.append(f"00O{ts_prefix(ts)}{text}")
        if name == "step_script":
            lines.append(f"00O{ts_prefix(ts)}{GREEN}$ pytest -q{RESET}")
            for i in range(300):
                ts += timedelta(milliseconds=random.randint(5, 200))
                status = f"{GREEN}PASSED{RESET}"
                if fail and i in {137, 241}:
                    status = f"{RED}FAILED{RESET}"
                elif random.random() < 0.03:
                    status = f"{YELLOW}SKIPPED{RESET}"
                lines.append(f"00O{ts_prefix(ts)}tests/test_module_{i // 20}.py::test_case_{i} {status}")
        lines.append(section(ts, name, title, start=False))

    ts += timedelta(seconds=1)
    if fail:
        lines.append(f"00E{ts_prefix(ts)}{RED}ERROR: Job failed: exit code 1{RESET}")
    else:
        lines.append(f"00O{ts_prefix(ts)}{GREEN}Job succeeded{RESET}")

    for line in lines:
        print(line)


if __name__ == "__main__":
    main()
