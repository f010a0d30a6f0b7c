import os
from typing import List, Optional

from autoclose.config import settings
from autoclose.manager import ResourceManager
from autoclose.scope import using


def open_fd(rm: ResourceManager, path: str, flags: int, mode: int = 0o644) -> int:
    return rm.register(os.open(path, flags, mode), release=os.close)


def copy_file(source: str, dest: str, chunk_size: Optional[int] = None) -> int:
    """
    Copy `source` to `dest` and return the number of bytes copied. Both file
    descriptors are closed when the copy ends, destination first.
    """
    chunk_size = chunk_size or settings.COPY_CHUNK_SIZE

    def work(rm: ResourceManager) -> int:
        src_fd = open_fd(rm, source, os.O_RDONLY | getattr(os, "O_BINARY", 0))
        dst_fd = open_fd(
            rm, dest, os.O_WRONLY | os.O_CREAT | os.O_TRUNC | getattr(os, "O_BINARY", 0)
        )
        total = 0
        data = os.read(src_fd, chunk_size)
        while data:
            view = memoryview(data)
            while view:
                view = view[os.write(dst_fd, view):]
            total += len(data)
            data = os.read(src_fd, chunk_size)
        return total

    return using(work)


def read_all(*paths: str) -> List[bytes]:
    def work(rm: ResourceManager) -> List[bytes]:
        files = [rm.register(open(p, "rb")) for p in paths]
        return [f.read() for f in files]

    return using(work)
