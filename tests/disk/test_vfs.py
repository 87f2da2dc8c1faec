import pytest

from jarc.disk.vfs import LocalDiskVFS


def test_local_disk_vfs(tmp_path):
    root = tmp_path / "www"
    vfs = LocalDiskVFS(str(root))

    vfs.save("js/main.js", "console.log(1);")
    vfs.save("index.html", "<h1>hi</h1>")

    assert root.is_dir()
    assert (root / "js" / "main.js").read_text(encoding="utf-8") == "console.log(1);"
    assert (root / "index.html").read_text(encoding="utf-8") == "<h1>hi</h1>"
    assert vfs.get_full_path("css/../index.html") == str(root / "index.html")


def test_local_disk_vfs_existing_root(tmp_path):
    (tmp_path / "css").mkdir()
    (tmp_path / "css" / "keep.css").write_text("keep", encoding="utf-8")
    vfs = LocalDiskVFS(str(tmp_path))

    vfs.save("css/style.css", "body {}")

    assert (tmp_path / "css" / "keep.css").read_text(encoding="utf-8") == "keep"
    assert (tmp_path / "css" / "style.css").read_text(encoding="utf-8") == "body {}"


def test_local_disk_vfs_no_create(tmp_path):
    with pytest.raises(ValueError):
        LocalDiskVFS(str(tmp_path / "missing"), create=False)
