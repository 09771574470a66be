import pytest


@pytest.fixture
def write_file(tmp_path):
    """Writes `content` to a file under tmp_path and returns its path as str."""
    def _write(name, content):
        path = tmp_path / name
        path.write_text(content)
        return str(path)
    return _write
