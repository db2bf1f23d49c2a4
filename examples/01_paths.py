"""
Path values - Build, compare and decompose paths
"""
from fstree import PathValue


def main():
    base = PathValue.of("/srv/data")

    # Compose with join or the / operator; every call returns a new path
    report = base / "2024" / ".." / "2025" / "report.txt"
    print(f"Report: {report}")
    print(f"Base unchanged: {base}")

    # Containment and equality
    print(f"Inside base: {report.inside(base)}")
    print(f"Base inside itself: {base.inside(base)}")
    print(f"Same as raw string: {report.is_same('/srv/data/2025/report.txt')}")

    # Relative forms
    print(f"Relative to base: {report.relative_to(base)}")

    # Decomposition snapshot
    bundle = report.bundle()
    print(f"dirname={bundle.dirname} basename={bundle.basename} extname={bundle.extname}")

    # pop drops the last segment
    print(f"Parent: {report.pop()}")


if __name__ == "__main__":
    main()
