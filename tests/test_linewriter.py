import os

import pytest

from heaprec.linewriter import BUFFER_CAPACITY, LineWriter, write_hex_number


@pytest.fixture
def target(tmp_path):
    path = tmp_path / "out.dat"
    fd = os.open(path, os.O_CREAT | os.O_RDWR, 0o644)
    writer = LineWriter(fd)
    yield path, writer
    writer.close()


def test_write_data(target):
    path, writer = target
    assert writer.can_write()
    writer.write("hello world\n")
    writer.write("%d %x\n", 42, 42)
    writer.write_hex_line("t", 0, 0, 1, 1, 15, 15, 16, 16)
    writer.write_hex_line("u", 2**32 - 2, 2**32 - 1)
    writer.write_hex_line("l", 2**64 - 2, 2**64 - 1)

    assert path.read_bytes() == b""

    writer.flush()

    expected = (
        b"hello world\n"
        b"42 2a\n"
        b"t 0 0 1 1 f f 10 10\n"
        b"u fffffffe ffffffff\n"
        b"l fffffffffffffffe ffffffffffffffff\n"
    )
    assert path.read_bytes() == expected


def test_buffered_write_hex(target):
    path, writer = target
    writer_lines = []
    for _ in range(10000):
        writer.write_hex_line("t", 0x123, 0x456)
        writer_lines.append("t 123 456\n")
    expected = "".join(writer_lines).encode()
    assert len(expected) > BUFFER_CAPACITY
    writer.flush()
    assert path.read_bytes() == expected


def test_write_flush(target):
    path, writer = target
    data1 = "#" * (BUFFER_CAPACITY - 10)
    writer.write(data1)
    assert path.read_bytes() == b""

    # fits only without a terminating NUL, so the first chunk is flushed
    data2 = "+" * 10
    writer.write(data2)
    assert path.read_bytes() == data1.encode()

    writer.flush()
    assert path.read_bytes() == (data1 + data2).encode()


def test_hex_line_without_values(target):
    path, writer = target
    writer.write_hex_line("c")
    writer.flush()
    assert path.read_bytes() == b"c \n"


@pytest.mark.parametrize("value", [-1, 2**64])
def test_hex_number_out_of_range(value):
    with pytest.raises(ValueError):
        write_hex_number(value)


def test_write_hex_number():
    assert write_hex_number(0) == "0"
    assert write_hex_number(16) == "10"
    assert write_hex_number(2**64 - 1) == "ffffffffffffffff"


def test_message_larger_than_buffer_raises(target):
    _, writer = target
    with pytest.raises(ValueError):
        writer.write("x" * (BUFFER_CAPACITY + 1))


def test_closed_writer_refuses_io(target):
    _, writer = target
    writer.close()
    assert writer.can_write() is False
    with pytest.raises(ValueError):
        writer.flush()
    with pytest.raises(ValueError):
        writer.write_hex_line("t", 1)


def test_context_manager_flushes_and_closes(tmp_path):
    path = tmp_path / "ctx.dat"
    fd = os.open(path, os.O_CREAT | os.O_RDWR, 0o644)
    with LineWriter(fd) as writer:
        writer.write_string("abc")
    assert writer.can_write() is False
    assert path.read_bytes() == b"3 abc"