import ast
import io
import subprocess
import tarfile
from pathlib import Path
from unittest import mock

import pytest

from fynext.theme.icongen import (
    ARCHIVE_ROOT,
    FORCE_PNG,
    ICONS_TO_GET,
    IconInfo,
    collect_icons,
    extract_tar,
    generate_icons,
    main,
    render_icon_source,
    svg_to_png,
)

SVG = b"<svg xmlns='http://www.w3.org/2000/svg'/>"


def _tar_bytes(files: dict[str, bytes], dirs: tuple[str, ...] = ()) -> bytes:
    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w") as archive:
        for d in dirs:
            info = tarfile.TarInfo(d)
            info.type = tarfile.DIRTYPE
            archive.addfile(info)
        for name, data in files.items():
            info = tarfile.TarInfo(name)
            info.size = len(data)
            archive.addfile(info, io.BytesIO(data))
    return buffer.getvalue()


def _parse_icons(source: str) -> dict:
    tree = ast.parse(source)
    assign = next(n for n in tree.body if isinstance(n, ast.Assign))
    assert assign.targets[0].id == "ADWAITA_ICONS"
    return ast.literal_eval(assign.value)


def test_extract_tar_writes_regular_files(tmp_path):
    data = _tar_bytes({"a/b/c.svg": SVG, "top.txt": b"hello"}, dirs=("a",))
    written = extract_tar(io.BytesIO(data), tmp_path)
    assert sorted(p.relative_to(tmp_path).as_posix() for p in written) == [
        "a/b/c.svg",
        "top.txt",
    ]
    assert (tmp_path / "a" / "b" / "c.svg").read_bytes() == SVG
    assert (tmp_path / "top.txt").read_bytes() == b"hello"


def test_extract_tar_rejects_escaping_member(tmp_path):
    data = _tar_bytes({"../outside.txt": b"x"})
    with pytest.raises(ValueError):
        extract_tar(io.BytesIO(data), tmp_path / "dest")


def test_icon_info_themed_only_for_symbolic():
    assert IconInfo("window-close-symbolic.svg", SVG).themed is True
    assert IconInfo("folder.svg", SVG).themed is False


@mock.patch("fynext.theme.icongen.shutil.which", return_value=None)
def test_collect_icons_skips_undefined_icons(_which, tmp_path):
    base = tmp_path / ARCHIVE_ROOT
    for name, relative in ICONS_TO_GET.items():
        if not relative:
            continue
        path = base / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(SVG)
        if name in FORCE_PNG:
            path.with_suffix(".png").write_bytes(b"\x89PNG")

    icons = collect_icons(tmp_path)
    assert set(icons) == {name for name, relative in ICONS_TO_GET.items() if relative}
    assert "history" not in icons
    assert icons["cancel"] == IconInfo("window-close-symbolic.svg", SVG)
    assert icons["fileApplication"].static_name.endswith(".png")


@mock.patch("fynext.theme.icongen.shutil.which", return_value=None)
def test_collect_icons_reads_present_files(_which, tmp_path):
    base = tmp_path / ARCHIVE_ROOT
    cancel = base / "symbolic/ui/window-close-symbolic.svg"
    cancel.parent.mkdir(parents=True)
    cancel.write_bytes(SVG)
    folder = base / "scalable/places/folder.svg"
    folder.parent.mkdir(parents=True)
    folder.write_bytes(b"<svg/>")

    icons = collect_icons(tmp_path)
    assert set(icons) == {"cancel", "folder"}
    assert icons["cancel"] == IconInfo("window-close-symbolic.svg", SVG)
    assert icons["folder"].content == b"<svg/>"
    assert "history" not in icons


@mock.patch("fynext.theme.icongen.shutil.which", return_value=None)
def test_collect_icons_uses_png_for_forced_icons(_which, tmp_path):
    png = tmp_path / ARCHIVE_ROOT / "scalable/mimetypes/audio-x-generic.png"
    png.parent.mkdir(parents=True)
    png.write_bytes(b"\x89PNG")
    (png.parent / "audio-x-generic.svg").write_bytes(SVG)

    icons = collect_icons(tmp_path)
    assert icons["fileAudio"].static_name == "audio-x-generic.png"
    assert icons["fileAudio"].content == b"\x89PNG"


@mock.patch("fynext.theme.icongen.shutil.which", return_value=None)
def test_svg_to_png_without_inkscape(_which, tmp_path):
    with pytest.raises(FileNotFoundError):
        svg_to_png(tmp_path / "icon.svg")


@mock.patch("fynext.theme.icongen.subprocess.run")
@mock.patch("fynext.theme.icongen.shutil.which", return_value="/opt/inkscape")
def test_svg_to_png_runs_inkscape(_which, run, tmp_path):
    target = tmp_path / "icon.svg"
    svg_to_png(target)
    args = run.call_args.args[0]
    assert args[0] == "/opt/inkscape"
    assert "--export-type=png" in args
    assert args[-1] == str(target)
    assert run.call_args.kwargs["check"] is True


@mock.patch("fynext.theme.icongen.shutil.which", return_value="/opt/inkscape")
@mock.patch(
    "fynext.theme.icongen.subprocess.run",
    side_effect=subprocess.CalledProcessError(1, "inkscape"),
)
def test_collect_icons_survives_failed_conversion(_run, _which, tmp_path):
    icons = collect_icons(tmp_path)
    assert icons == {}


def test_render_icon_source_round_trip():
    icons = {
        "cancel": IconInfo("window-close-symbolic.svg", SVG),
        "folder": IconInfo("folder.svg", b"\x00\xffdata"),
    }
    parsed = _parse_icons(render_icon_source(icons))
    assert parsed == {
        "cancel": {"name": "window-close-symbolic.svg", "content": SVG, "themed": True},
        "folder": {"name": "folder.svg", "content": b"\x00\xffdata", "themed": False},
    }


def test_render_icon_source_empty():
    assert _parse_icons(render_icon_source({})) == {}


@mock.patch("fynext.theme.icongen.shutil.which", return_value=None)
def test_generate_icons_from_file_url(_which, tmp_path):
    member = (ARCHIVE_ROOT / "symbolic/actions/edit-delete-symbolic.svg").as_posix()
    archive = tmp_path / "icons.tar"
    archive.write_bytes(_tar_bytes({member: SVG}))
    output = tmp_path / "icons.py"

    generate_icons(archive.as_uri(), output)
    parsed = _parse_icons(output.read_text(encoding="utf-8"))
    assert parsed == {
        "delete": {"name": "edit-delete-symbolic.svg", "content": SVG, "themed": True}
    }


@mock.patch("fynext.theme.icongen.shutil.which", return_value=None)
def test_main_writes_both_modules(_which, tmp_path):
    page = tmp_path / "page.html"
    page.write_text("<html><table></table></html>", encoding="utf-8")
    archive = tmp_path / "icons.tar"
    member = (ARCHIVE_ROOT / "symbolic/ui/window-close-symbolic.svg").as_posix()
    archive.write_bytes(_tar_bytes({member: SVG}))
    colors_out = tmp_path / "colors.py"
    icons_out = tmp_path / "icons.py"

    code = main([
        "--colors-url", page.as_uri(),
        "--icons-url", archive.as_uri(),
        "--colors-output", str(colors_out),
        "--icons-output", str(icons_out),
    ])
    assert code == 0
    assert "DARK_SCHEME" in colors_out.read_text(encoding="utf-8")
    assert set(_parse_icons(icons_out.read_text(encoding="utf-8"))) == {"cancel"}


def test_main_reports_missing_source(tmp_path):
    missing = (tmp_path / "nope.html").as_uri()
    code = main([
        "--colors-url", missing,
        "--icons-url", missing,
        "--colors-output", str(tmp_path / "c.py"),
        "--icons-output", str(tmp_path / "i.py"),
    ])
    assert code == 1
    assert not Path(tmp_path / "c.py").exists()


def test_main_requires_urls():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2