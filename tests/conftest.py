"""Shared test fixtures for the vgsuppress test suite."""

import pytest

from vgsuppress.suppression.models import StackFrame


SAMPLE_SUPPRESSIONS = """\
# Suppressions for the system libraries
{
   ld-so-cond
   Memcheck:Cond
   obj:/lib*/ld-2.*.so
   ...
}

{
   write-param
   Memcheck:Param
   write(buf)
   fun:__write_nocancel
   fun:_IO_file_write*
   ...
   fun:main
}

{
   <leak_in_init>
   Memcheck:Leak
   match-leak-kinds: definite
   fun:malloc
   fun:init_*
}
"""


@pytest.fixture
def sample_text():
    """A small suppression file with three blocks."""
    return SAMPLE_SUPPRESSIONS


@pytest.fixture
def malloc_trace():
    """Innermost-first trace: malloc <- helper <- main."""
    return [
        StackFrame(function_name="malloc", object_path="/usr/lib/libc.so.6"),
        StackFrame(function_name="helper", object_path="/usr/bin/app"),
        StackFrame(function_name="main", object_path="/usr/bin/app"),
    ]


@pytest.fixture
def write_trace():
    """Trace of a write() with an uninitialised buffer."""
    return [
        StackFrame(function_name="__write_nocancel", object_path="/lib64/libc-2.31.so"),
        StackFrame(function_name="_IO_file_write@@GLIBC_2.2.5", object_path="/lib64/libc-2.31.so"),
        StackFrame(function_name="new_do_write", object_path="/lib64/libc-2.31.so"),
        StackFrame(function_name="_IO_do_write", object_path="/lib64/libc-2.31.so"),
        StackFrame(function_name="main", object_path="/usr/bin/app"),
        StackFrame(function_name="__libc_start_main", object_path="/lib64/libc-2.31.so"),
    ]
