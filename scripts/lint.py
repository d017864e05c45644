"""
Lint script runner.

Usage:
    python scripts/lint.py [path ...]

With no paths the tinypas package and the pas driver are linted. Both
flake8 and pylint always run, so one report never hides the other.
"""
import subprocess
import sys


DEFAULT_TARGETS = ["./tinypas", "./pas.py"]

LINTERS = {
    "flake8": ["--exclude=tinypas/tests", "--max-line-length=110"],
    "pylint": ["--ignore=tests", "--max-line-length=110"],
}


def run_linter(name: str, targets: list[str]) -> bool:
    """
    Run one linter over the targets and report whether it passed.
    """
    print(f"Running {name} on {' '.join(targets)}...")
    completed = subprocess.run([name, *targets, *LINTERS[name]], check=False)
    if completed.returncode != 0:
        print(f"{name} failed with exit code {completed.returncode}")
        return False
    return True


def main(argv: list[str]) -> int:
    """
    Lint the given paths, or the whole project, with flake8 and pylint.
    """
    targets = argv or DEFAULT_TARGETS
    failed = [name for name in LINTERS if not run_linter(name, targets)]
    if failed:
        print(f"Lint failed: {', '.join(failed)}")
        return 1
    print("Lint passed.")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
