import enum

from pytest import mark

from utilkit import is_byte_set, is_set


class Perm(enum.IntFlag):
    READ = 1
    WRITE = 2
    EXEC = 4


@mark.parametrize(
    "value, mask, expected",
    [
        (0b1011, 0b0011, True),
        (0b1011, 0b0111, False),
        (0, 0, True),
        (5, 0, True),
    ],
)
def test_is_set_int(value, mask, expected):
    assert is_set(value, mask) is expected


def test_is_set_flags():
    perms = Perm.READ | Perm.WRITE
    assert is_set(perms, Perm.READ)
    assert is_set(perms, Perm.READ | Perm.WRITE)
    assert not is_set(perms, Perm.EXEC)


def test_is_byte_set_truncates():
    assert is_byte_set(0x1FF, 0x0F)
    assert is_byte_set(0x100, 0x100)
    assert not is_byte_set(0x0F, 0x10)
