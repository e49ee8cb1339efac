"""Tests for the entry point result and the window wiring."""

from __future__ import annotations

from identicon.controllers.app_controller import AppController
from identicon.services.identicon_service import IdenticonService
from identicon.services.render_service import RenderService
from tests.conftest import TEST_COLOR


class FakeView:
    def __init__(self) -> None:
        self.on_generate = None
        self.preview = None
        self.status = None

    def set_preview(self, image_data) -> None:
        self.preview = image_data

    def set_status(self, ok: bool, message: str) -> None:
        self.status = (ok, message)


def test_create_identicon_in_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    ok, message = AppController().create_identicon("test")

    assert ok is True
    assert message == "Successfully create file, see path: ./test.png"
    expected = RenderService().compute_image(IdenticonService().build("test"))
    assert (tmp_path / "test.png").read_bytes() == expected


def test_create_identicon_in_output_dir(controller, tmp_path):
    ok, message = controller.create_identicon("alice")

    assert ok is True
    assert message == f"Successfully create file, see path: {tmp_path.as_posix()}/alice.png"
    assert controller.last_path == tmp_path / "alice.png"
    # the CLI path does not read the file back
    assert controller.last_image is None


def test_create_identicon_reports_storage_failure(tmp_path):
    controller = AppController(output_dir=tmp_path / "does-not-exist")
    ok, message = controller.create_identicon("test")

    assert ok is False
    assert "test.png" in message
    assert controller.last_path is None


def test_create_identicon_reports_hash_failure(controller, tmp_path):
    ok, message = controller.create_identicon(12345)

    assert ok is False
    assert "int" in message
    assert list(tmp_path.iterdir()) == []


def test_view_generate_updates_preview_and_status(tmp_path):
    view = FakeView()
    controller = AppController(output_dir=tmp_path, view=view)
    controller.bind_events()

    view.on_generate("test")

    assert view.status[0] is True
    assert view.preview.pil_image.getpixel((75, 75)) == TEST_COLOR
    assert (tmp_path / "test.png").exists()


def test_view_generate_with_empty_seed(tmp_path):
    view = FakeView()
    controller = AppController(output_dir=tmp_path, view=view)
    controller.bind_events()

    view.on_generate("")

    assert view.status[0] is False
    assert view.preview is None
    assert list(tmp_path.iterdir()) == []


def test_create_identicon_reports_nul_in_seed(controller, tmp_path):
    ok, message = controller.create_identicon("a\x00b")

    assert ok is False
    assert "a\x00b.png" in message
    assert list(tmp_path.iterdir()) == []


def test_create_identicon_with_undecodable_argv_seed(controller, tmp_path):
    # "\udcff" is how sys.argv carries the raw byte 0xff on POSIX
    ok, message = controller.create_identicon("\udcff")

    assert ok is True
    assert message.endswith("/\\udcff.png")
    message.encode("utf-8")
    assert (tmp_path / "\udcff.png").exists()


def test_create_identicon_with_relative_output_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "avatars").mkdir()

    ok, message = AppController(output_dir="avatars").create_identicon("bob")

    assert ok is True
    assert message == "Successfully create file, see path: ./avatars/bob.png"


def test_create_identicon_with_absolute_seed(tmp_path, monkeypatch):
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    target = tmp_path / "elsewhere"

    ok, message = AppController().create_identicon(str(target))

    assert ok is True
    assert message == f"Successfully create file, see path: {target.as_posix()}.png"
    assert (tmp_path / "elsewhere.png").is_file()
    assert list(workdir.iterdir()) == []


def test_view_generate_survives_unreadable_file(tmp_path, monkeypatch):
    view = FakeView()
    controller = AppController(output_dir=tmp_path, view=view)
    controller.bind_events()

    def broken_load(path):
        raise ValueError(f"not an image: {path}")

    monkeypatch.setattr(controller._image_service, "load_image", broken_load)
    view.on_generate("test")

    assert view.status == (True, "Successfully create file, see path: " + f"{(tmp_path / 'test.png').as_posix()}")
    assert view.preview is None
