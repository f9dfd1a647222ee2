import subprocess
import sys

SOURCES = ["src", "tests"]

TASKS = {
    "run_tests": [["pytest"]],
    "run_lint": [["flake8", "--max-line-length", "120", *SOURCES]],
    "run_typecheck": [["mypy", "src"]],
    "run_format": [["black", *SOURCES]],
    "run_coverage": [["pytest", "--cov=srcfilter", "--cov-report=term-missing", "--cov-report=xml"]],
}
TASKS["run_checks"] = TASKS["run_lint"] + TASKS["run_typecheck"] + TASKS["run_tests"]


def run(task):
    for command in TASKS[task]:
        subprocess.run(command, check=True)


if __name__ == "__main__":
    if len(sys.argv) != 2 or sys.argv[1] not in TASKS:
        print(f"usage: python scripts.py {{{','.join(TASKS)}}}", file=sys.stderr)
        sys.exit(2)
    run(sys.argv[1])
