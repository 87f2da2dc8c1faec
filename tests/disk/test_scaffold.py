import os
import shutil

import pytest

from jarc.disk.scaffold import (
    WebAssetSource,
    copy_web_assets,
    create_basic_www,
    find_existing_web_assets,
    materialize_web_assets,
    setup_project_directory,
)


def test_setup_project_directory(tmp_path):
    root, existed = setup_project_directory("myapp", str(tmp_path))

    assert root == str(tmp_path / "myapp")
    assert existed is False
    assert os.path.isdir(root)


def test_setup_project_directory_existing(tmp_path):
    (tmp_path / "myapp").mkdir()
    (tmp_path / "myapp" / "keep.txt").write_text("keep", encoding="utf-8")

    root, existed = setup_project_directory("myapp", str(tmp_path))

    assert existed is True
    assert (tmp_path / "myapp" / "keep.txt").read_text(encoding="utf-8") == "keep"


def test_setup_project_directory_file_in_the_way(tmp_path):
    (tmp_path / "myapp").write_text("", encoding="utf-8")

    with pytest.raises(OSError):
        setup_project_directory("myapp", str(tmp_path))


def test_find_existing_web_assets(tmp_path):
    assert find_existing_web_assets(str(tmp_path)) is None

    (tmp_path / "www").mkdir()
    assert find_existing_web_assets(str(tmp_path)) == str(tmp_path / "www")
    assert find_existing_web_assets(str(tmp_path), "public") is None


def test_copy_web_assets(tmp_path):
    source = tmp_path / "www"
    (source / "img").mkdir(parents=True)
    (source / "index.html").write_text("<h1>mine</h1>", encoding="utf-8")
    (source / "img" / "logo.svg").write_text("<svg/>", encoding="utf-8")
    project_root = tmp_path / "myapp"
    (project_root / "www").mkdir(parents=True)
    (project_root / "www" / "index.html").write_text("old", encoding="utf-8")

    dest = copy_web_assets(str(source), str(project_root))

    assert dest == str(project_root / "www")
    assert (project_root / "www" / "index.html").read_text(encoding="utf-8") == "<h1>mine</h1>"
    assert (project_root / "www" / "img" / "logo.svg").is_file()


def test_copy_web_assets_same_directory(tmp_path):
    (tmp_path / "www").mkdir()
    (tmp_path / "www" / "index.html").write_text("same", encoding="utf-8")

    with pytest.raises(shutil.Error):
        copy_web_assets(str(tmp_path / "www"), str(tmp_path))

    assert os.listdir(tmp_path / "www") == ["index.html"]


def test_materialize_into_itself(tmp_path):
    (tmp_path / "www").mkdir()
    (tmp_path / "www" / "index.html").write_text("mine", encoding="utf-8")
    project_root, existed = setup_project_directory("www", str(tmp_path))

    assert existed is True
    with pytest.raises(OSError):
        materialize_web_assets("www", str(tmp_path), project_root)

    assert not (tmp_path / "www" / "www").exists()


def test_create_basic_www(tmp_path):
    summary = create_basic_www(str(tmp_path), "Hello <World>")

    www = tmp_path / "www"
    index = (www / "index.html").read_text(encoding="utf-8")
    assert "<title>Hello &lt;World&gt;</title>" in index
    assert "Welcome to Hello &lt;World&gt;!" in index
    assert 'href="./css/style.css"' in index
    assert 'src="./js/main.js"' in index
    assert (www / "css" / "style.css").is_file()
    assert 'console.log("Hello <World> started");' in (www / "js" / "main.js").read_text(encoding="utf-8")
    assert "* index.html" in summary
    assert "* css/style.css" in summary


def test_materialize_copies_existing(tmp_path):
    (tmp_path / "www").mkdir()
    (tmp_path / "www" / "index.html").write_text("mine", encoding="utf-8")
    (tmp_path / "myapp").mkdir()

    source, details = materialize_web_assets("myapp", str(tmp_path), str(tmp_path / "myapp"))

    assert source == WebAssetSource.COPIED
    assert details == str(tmp_path / "www")
    assert (tmp_path / "myapp" / "www" / "index.html").read_text(encoding="utf-8") == "mine"
    assert not (tmp_path / "myapp" / "www" / "css").exists()


def test_materialize_generates_starter(tmp_path):
    (tmp_path / "myapp").mkdir()

    source, details = materialize_web_assets("myapp", str(tmp_path), str(tmp_path / "myapp"), "public")

    assert source == WebAssetSource.GENERATED
    assert "index.html" in details
    assert (tmp_path / "myapp" / "public" / "index.html").is_file()
