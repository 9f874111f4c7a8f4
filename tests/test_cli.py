from __future__ import annotations

from typer.testing import CliRunner

from cemetery_api.cli import app

runner = CliRunner()


def test_check_allows():
    result = runner.invoke(app, ["check", "viewer", "get", "/gravestones"])
    assert result.exit_code == 0
    assert "GET /gravestones" in result.output
    assert "viewer: allow" in result.output


def test_check_denies_with_exit_code():
    result = runner.invoke(app, ["check", "operator", "DELETE", "/gravestones/:id"])
    assert result.exit_code == 1
    assert "required: manager, admin" in result.output
    assert "operator: deny" in result.output


def test_check_unmapped_route_uses_default():
    result = runner.invoke(app, ["check", "manager", "POST", "/some/unmapped/route"])
    assert result.exit_code == 1
    assert "required: admin (default)" in result.output


def test_check_rejects_unknown_role():
    result = runner.invoke(app, ["check", "wizard", "GET", "/gravestones"])
    assert result.exit_code == 2


def test_can():
    assert runner.invoke(app, ["can", "manager", "contractor", "transfer"]).exit_code == 0
    result = runner.invoke(app, ["can", "operator", "contractor", "transfer"])
    assert result.exit_code == 1
    assert "contractor:transfer operator: deny" in result.output


def test_matrix_filtered_by_role():
    result = runner.invoke(app, ["matrix", "--role", "viewer"])
    assert result.exit_code == 0
    assert "GET /gravestones" in result.output
    assert "DELETE /gravestones/*" not in result.output
