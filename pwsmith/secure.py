# SecureString
# (opaque handle for generated password)
#

import ctypes
from ctypes.util import find_library
from ctypes import c_void_p, c_size_t, c_int
import sys
import os
import errno
import resource

libc = ctypes.CDLL(find_library("c"), use_errno=True)

MASK = '*' * 8


def memory_lock(addr, len):
    """Try to lock an address against being swapped.

    Encountering error while locking memory is not considered fatal,
    no exception is raised.

    The memory page stays locked until the process terminates,
    mlock calls do not stack, so there is no safe munlock.

    """
    # Set MEMLOCK soft limit to maximum
    limits = resource.getrlimit(resource.RLIMIT_MEMLOCK)
    resource.setrlimit(resource.RLIMIT_MEMLOCK, (limits[1], limits[1]))
    try:
        rc = libc.mlock(c_void_p(addr), c_size_t(len))
    except OSError as e:
        print("Warning: Unable to lock memory.", str(e))
        return
    if rc == -1:  # pragma: no cover
        err = ctypes.get_errno()
        if err == errno.ENOMEM:
            limit = resource.getrlimit(resource.RLIMIT_MEMLOCK)[1]
            print("Warning: Unable to lock memory.",
                  "Consider raising MEMLOCK limit (current %d)." % limit)
        else:
            print("Error (mlock):", errno.errorcode[err], os.strerror(err))


def memory_clear(addr, len):
    try:
        rc = libc.memset(c_void_p(addr), c_int(0), c_size_t(len))
    except OSError as e:
        print("Warning: Unable to clear memory.", str(e))
        return
    if rc == -1:  # pragma: no cover
        err = ctypes.get_errno()
        print("Error (memset):", errno.errorcode[err], os.strerror(err))


class SecureString:

    """Generated password kept in locked memory.

    The password is stored UTF-8 encoded in a private bytes object,
    which is memlocked and zeroed when cleared or deleted.
    This is a little hacky, it depends on CPython and its bytes
    object implementation.

    `str()` and `repr()` never reveal the content, use :meth:`reveal`.
    `len()` is the length in characters, as the password would be rendered.

    """

    def __init__(self, password: str):
        self._length = len(password)
        self._data = password.encode('utf-8')
        self._cleared = False
        memory_lock(id(self._data), sys.getsizeof(self._data))

    def __del__(self):
        self.clear()

    def __len__(self):
        return self._length

    def __str__(self):
        return MASK

    def __repr__(self):
        return f"{self.__class__.__name__}({MASK!r})"

    def __eq__(self, other):
        if isinstance(other, SecureString):
            other = other._data
        elif isinstance(other, str):
            other = other.encode('utf-8')
        else:
            return NotImplemented
        return not self._cleared and self._data == other

    __hash__ = None

    def reveal(self) -> str:
        if self._cleared:
            raise ValueError("SecureString was cleared")
        return self._data.decode('utf-8')

    def clear(self):
        """Zero the data. The object is not usable afterwards."""
        # empty and one-byte bytes objects are shared singletons in CPython
        if self._cleared or len(self._data) < 2:
            self._cleared = True
            return
        addr = id(self._data)
        brutto = sys.getsizeof(self._data)
        netto = len(self._data)
        # CPython assumption:
        # bytes object has header, followed by data and 1 byte terminator
        memory_clear(addr + (brutto - netto - 1), netto)
        self._cleared = True
