"""
Tree walking - Resolve a directory subtree and query it
"""
import asyncio
import logging
import sys

from fstree import FS, setup_logging


async def main(root: str):
    fs = FS()

    tree = await fs.tree(root)

    print("--- Every entry ---")
    for path in fs.flatten(tree):
        print(f"  {path}")

    print("\n--- Files ---")
    for path in fs.files(tree):
        print(f"  {path.relative_to(root)}")

    print("\n--- Non-empty directories ---")
    for path in fs.directories(tree):
        print(f"  {path.relative_to(root)}")

    print(f"\nTotal size: {tree.size} bytes")


if __name__ == "__main__":
    logging.basicConfig()
    setup_logging(logging.DEBUG)
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else "."))
