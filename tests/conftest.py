import pytest

# 10-byte payload [0..9] wrapped with the default header.
SAMPLE_CONTAINER = bytes([
    82, 73, 70, 70, 46, 0, 0, 0, 87, 65, 86, 69, 102, 109, 116, 32,
    16, 0, 0, 0, 1, 0, 1, 0, 108, 24, 3, 0, 216, 48, 6, 0,
    2, 0, 16, 0, 100, 97, 116, 97, 10, 0, 0, 0,
    0, 1, 2, 3, 4, 5, 6, 7, 8, 9,
])


@pytest.fixture
def sample_container() -> bytes:
    return SAMPLE_CONTAINER


@pytest.fixture
def payload_file(tmp_path):
    p = tmp_path / "payload.bin"
    p.write_bytes(bytes(range(256)) * 1000 + b"tail")
    return p
