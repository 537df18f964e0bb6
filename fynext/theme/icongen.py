"""Bundles Adwaita icons from the icon theme archive into a generated module."""

from __future__ import annotations

import argparse
import logging
import shutil
import subprocess
import sys
import tarfile
import tempfile
import urllib.request
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from .colorgen import generate_color_scheme

logger = logging.getLogger(__name__)

ARCHIVE_ROOT = Path("adwaita-icon-theme-master-Adwaita", "Adwaita")
"""Where the icons sit inside the extracted archive."""

ICONS_TO_GET = {
    "cancel": "symbolic/ui/window-close-symbolic.svg",
    "confirm": "symbolic/actions/object-select-symbolic.svg",
    "delete": "symbolic/actions/edit-delete-symbolic.svg",
    "search": "symbolic/actions/edit-find-symbolic.svg",
    "searchReplace": "symbolic/actions/edit-find-replace-symbolic.svg",
    "menu": "symbolic/actions/open-menu-symbolic.svg",
    "menuExpand": "symbolic/ui/pan-end-symbolic.svg",
    "checkButton": "symbolic/ui/checkbox-symbolic.svg",
    "checkButtonChecked": "symbolic/ui/checkbox-checked-symbolic.svg",
    "radioButton": "symbolic/ui/radio-symbolic.svg",
    "radioButtonChecked": "symbolic/ui/radio-checked-symbolic.svg",
    "contentAdd": "symbolic/actions/list-add-symbolic.svg",
    "contentClear": "symbolic/actions/edit-clear-symbolic.svg",
    "contentRemove": "symbolic/actions/list-remove-symbolic.svg",
    "contentCut": "symbolic/actions/edit-cut-symbolic.svg",
    "contentCopy": "symbolic/actions/edit-copy-symbolic.svg",
    "contentPaste": "symbolic/actions/edit-paste-symbolic.svg",
    "contentRedo": "symbolic/actions/edit-redo-symbolic.svg",
    "contentUndo": "symbolic/actions/edit-undo-symbolic.svg",
    "colorAchromatic": "",
    "colorChromatic": "",
    "colorPalette": "symbolic/categories/applications-graphics-symbolic.svg",
    "document": "symbolic/mimetypes/text-x-generic-symbolic.svg",
    "documentCreate": "symbolic/actions/document-new-symbolic.svg",
    "documentPrint": "symbolic/actions/document-print-symbolic.svg",
    "documentSave": "symbolic/actions/document-save-symbolic.svg",
    "moreHorizontal": "symbolic/actions/view-more-horizontal-symbolic.svg",
    "moreVertical": "symbolic/actions/view-more-symbolic.svg",
    "info": "symbolic/status/dialog-information-symbolic.svg",
    "question": "symbolic/status/dialog-question-symbolic.svg",
    "warning": "symbolic/status/dialog-warning-symbolic.svg",
    "error": "symbolic/status/dialog-error-symbolic.svg",
    "mailAttachment": "symbolic/status/mail-attachment-symbolic.svg",
    "mailCompose": "symbolic/actions/mail-message-new-symbolic.svg",
    "mailForward": "symbolic/actions/mail-forward-symbolic.svg",
    "mailReply": "symbolic/actions/mail-reply-sender-symbolic.svg",
    "mailReplyAll": "symbolic/actions/mail-reply-all-symbolic.svg",
    "mailSend": "symbolic/actions/mail-send-symbolic.svg",
    "mediaMusic": "symbolic/mimetypes/audio-x-generic-symbolic.svg",
    "mediaPhoto": "symbolic/mimetypes/image-x-generic-symbolic.svg",
    "mediaVideo": "symbolic/mimetypes/video-x-generic-symbolic.svg",
    "mediaFastForward": "symbolic/actions/media-seek-forward-symbolic.svg",
    "mediaFastRewind": "symbolic/actions/media-seek-backward-symbolic.svg",
    "mediaPause": "symbolic/actions/media-playback-pause-symbolic.svg",
    "mediaPlay": "symbolic/actions/media-playback-start-symbolic.svg",
    "mediaRecord": "symbolic/actions/media-record-symbolic.svg",
    "mediaReplay": "symbolic/actions/media-seek-backward-symbolic.svg",
    "mediaSkipNext": "symbolic/actions/media-skip-forward-symbolic.svg",
    "mediaSkipPrevious": "symbolic/actions/media-skip-backward-symbolic.svg",
    "mediaStop": "symbolic/actions/media-playback-stop-symbolic.svg",
    "navigateBack": "symbolic/actions/go-previous-symbolic.svg",
    "moveDown": "symbolic/actions/go-down-symbolic.svg",
    "navigateNext": "symbolic/actions/go-next-symbolic.svg",
    "moveUp": "symbolic/actions/go-up-symbolic.svg",
    "arrowDropDown": "symbolic/actions/go-down-symbolic.svg",
    "arrowDropUp": "symbolic/actions/go-up-symbolic.svg",
    "file": "scalable/mimetypes/application-x-generic.svg",
    "fileApplication": "scalable/mimetypes/application-x-executable.svg",
    "fileAudio": "scalable/mimetypes/audio-x-generic.svg",
    "fileImage": "scalable/mimetypes/image-x-generic.svg",
    "fileText": "scalable/mimetypes/text-x-generic.svg",
    "fileVideo": "scalable/mimetypes/video-x-generic.svg",
    "folder": "scalable/places/folder.svg",
    "folderNew": "symbolic/actions/folder-new-symbolic.svg",
    "folderOpen": "symbolic/status/folder-open-symbolic.svg",
    "help": "symbolic/actions/help-about-symbolic.svg",
    "history": "",
    "home": "symbolic/places/user-home-symbolic.svg",
    "settings": "symbolic/categories/applications-system-symbolic.svg",
    "viewFullScreen": "symbolic/actions/view-fullscreen-symbolic.svg",
    "viewRefresh": "symbolic/actions/view-refresh-symbolic.svg",
    "viewRestore": "symbolic/actions/view-restore-symbolic.svg",
    "viewZoomFit": "symbolic/actions/zoom-fit-best-symbolic.svg",
    "viewZoomIn": "symbolic/actions/zoom-in-symbolic.svg",
    "viewZoomOut": "symbolic/actions/zoom-out-symbolic.svg",
    "visibility": "symbolic/actions/view-reveal-symbolic.svg",
    "visibilityOff": "symbolic/actions/view-conceal-symbolic.svg",
    "volumeDown": "symbolic/status/audio-volume-low-symbolic.svg",
    "volumeMute": "symbolic/status/audio-volume-muted-symbolic.svg",
    "volumeUp": "symbolic/status/audio-volume-high-symbolic.svg",
    "download": "symbolic/places/folder-download-symbolic.svg",
    "computer": "symbolic/devices/computer-symbolic.svg",
    "storage": "symbolic/devices/drive-harddisk-symbolic.svg",
    "upload": "symbolic/actions/send-to-symbolic.svg",
    "account": "symbolic/status/avatar-default-symbolic.svg",
    "login": "",
    "logout": "symbolic/actions/system-log-out-symbolic.svg",
    "list": "symbolic/actions/view-list-symbolic.svg",
    "grid": "symbolic/actions/view-grid-symbolic.svg",
}
"""Theme icon names mapped to their file in the archive; empty means no icon yet."""

FORCE_PNG = frozenset({"fileAudio", "fileApplication"})
"""Icons whose SVG is converted to PNG before bundling."""


@dataclass(frozen=True)
class IconInfo:
    """An icon file's name and content."""

    static_name: str
    content: bytes

    @property
    def themed(self) -> bool:
        """Whether the icon is symbolic and so recoloured by the theme."""
        return "symbolic" in self.static_name


def extract_tar(stream: BinaryIO, dest: str | Path) -> list[Path]:
    """Extract the regular files of the tar ``stream`` under ``dest``.

    Returns the paths written.
    """
    dest = Path(dest)
    base = dest.resolve()
    written: list[Path] = []
    with tarfile.open(fileobj=stream, mode="r|*") as archive:
        for member in archive:
            if not member.isreg():
                continue
            target = dest / member.name
            if not target.resolve().is_relative_to(base):
                raise ValueError(f"archive member escapes destination: {member.name}")
            target.parent.mkdir(parents=True, exist_ok=True)
            source = archive.extractfile(member)
            if source is None:
                continue
            with target.open("wb") as out:
                shutil.copyfileobj(source, out)
            written.append(target)
    return written


def svg_to_png(filename: str | Path) -> None:
    """Convert an SVG file to a PNG beside it using inkscape."""
    inkscape = shutil.which("inkscape")
    if inkscape is None:
        raise FileNotFoundError("inkscape not found")
    logger.info("Converting %s to PNG", filename)
    subprocess.run(
        [
            inkscape,
            "--export-type=png",
            "--export-area-drawing",
            "--vacuum-defs",
            str(filename),
        ],
        check=True,
    )


def collect_icons(root: str | Path) -> dict[str, IconInfo]:
    """Read the wanted icons from an archive extracted under ``root``.

    Icons that cannot be read are logged and left out.
    """
    icons: dict[str, IconInfo] = {}
    for name, icon_file in ICONS_TO_GET.items():
        if not icon_file:
            continue
        icon_path = Path(root) / ARCHIVE_ROOT / icon_file
        if name in FORCE_PNG:
            try:
                svg_to_png(icon_path)
            except (OSError, subprocess.CalledProcessError) as exc:
                logger.warning("Could not convert %s to PNG: %s", icon_path, exc)
            icon_path = icon_path.with_suffix(".png")
        try:
            content = icon_path.read_bytes()
        except OSError as exc:
            logger.warning("Error bundling %s from %s: %s", name, icon_path, exc)
            continue
        icons[name] = IconInfo(icon_path.name, content)
    return icons


def render_icon_source(icons: dict[str, IconInfo]) -> str:
    """Return the source of a module defining ``ADWAITA_ICONS``."""
    lines = [
        '"""Adwaita icons. Generated by fynext.theme.icongen; do not edit."""',
        "",
        "ADWAITA_ICONS = {",
    ]
    for name in sorted(icons):
        icon = icons[name]
        lines.append(
            f"    {name!r}: {{'name': {icon.static_name!r}, "
            f"'content': {icon.content!r}, 'themed': {icon.themed!r}}},"
        )
    lines.append("}")
    return "\n".join(lines) + "\n"


def generate_icons(url: str, output: str | Path) -> None:
    """Download the icon archive at ``url`` and write the icon module to ``output``."""
    with tempfile.TemporaryDirectory(prefix="adwaita") as tmp:
        with urllib.request.urlopen(url) as response:
            extract_tar(response, tmp)
        icons = collect_icons(tmp)
    Path(output).write_text(render_icon_source(icons), encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    """Generate the Adwaita colour and icon modules."""
    parser = argparse.ArgumentParser(description="Generate the Adwaita theme modules.")
    parser.add_argument("--colors-url", required=True,
                        help="address of the named-colours documentation page")
    parser.add_argument("--icons-url", required=True,
                        help="address of the icon theme tar archive")
    parser.add_argument("--colors-output", default="adwaita_colors.py")
    parser.add_argument("--icons-output", default="adwaita_icons.py")
    args = parser.parse_args(argv)

    try:
        generate_color_scheme(args.colors_url, args.colors_output)
        generate_icons(args.icons_url, args.icons_output)
    except (OSError, ValueError, tarfile.TarError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0