from pathlib import Path

import pytest
import yaml

from assemblyinfo_cli.__main__ import main, setup


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    path = tmp_path.joinpath("assemblyinfo.yml")
    with path.open("w", encoding="utf-8") as file:
        yaml.dump({
            "output": "AssemblyInfo.cs",
            "settings": {"title": "MyLib", "version": "1.0.0.0", "internalsVisibleTo": "MyLib.Tests"},
        }, file)
    return path


def test_setup(config_path: Path, tmp_path: Path, capsys: pytest.CaptureFixture):
    config = setup(["-c", str(config_path), "--dump"])

    assert config.output == tmp_path.joinpath("AssemblyInfo.cs")
    assert config.settings.title == "MyLib"
    assert "title: MyLib" in capsys.readouterr().out


def test_setup_with_output_override(config_path: Path, tmp_path: Path):
    output = tmp_path.joinpath("other.cs")
    config = setup(["--config", str(config_path), "--output", str(output)])

    assert config.output == output


def test_setup_fails_on_missing_config(tmp_path: Path):
    with pytest.raises(SystemExit):
        setup(["-c", str(tmp_path.joinpath("missing.yml"))])


def test_main(config_path: Path, tmp_path: Path, capsys: pytest.CaptureFixture):
    assert main(["-c", str(config_path)]) == 0

    path = tmp_path.joinpath("AssemblyInfo.cs")
    content = path.read_bytes().decode("utf-8")
    assert "[assembly: AssemblyTitle(\"MyLib\")]\n[assembly: AssemblyVersion(\"1.0.0.0\")]\n\n" in content
    assert "InternalsVisibleTo(\"MyLib.Tests\")" in content
    assert str(path) in capsys.readouterr().out


def test_main_fails_on_unwritable_output(config_path: Path, tmp_path: Path, capsys: pytest.CaptureFixture):
    output = tmp_path.joinpath("missing", "AssemblyInfo.cs")
    assert main(["-c", str(config_path), "-o", str(output)]) == 1

    assert not output.exists()
    assert "FileSystemError" in capsys.readouterr().out
