"""
File operations - Create directories, write, append and read back
"""
import asyncio
import tempfile

from fstree import FS, NotDirectoryError, PathValue


async def main():
    fs = FS()

    with tempfile.TemporaryDirectory() as tmp:
        base = PathValue(tmp)

        await fs.mkdir(base / "build" / "out")
        log = base / "build" / "out" / "log.txt"

        await fs.write(log, "started\n")
        await fs.append(log, "done\n")
        print(await fs.read_text(log))

        for child in await fs.ls(base / "build"):
            print(f"Child: {child}")

        # Writes never create missing parents
        try:
            await fs.write(base / "missing" / "f.txt", "x")
        except NotDirectoryError as e:
            print(f"Refused: {e}")


if __name__ == "__main__":
    asyncio.run(main())
