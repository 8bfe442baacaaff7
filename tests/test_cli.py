import json

from typer.testing import CliRunner

from printify_client.cli import app

runner = CliRunner()


def write_config(tmp_path, **overrides):
    data = {"api_key": "test-token", "shop_id": 1234567}
    data.update(overrides)
    path = tmp_path / "config.json"
    path.write_text(json.dumps(data))
    return str(path)


def test_init_writes_example_config(tmp_path):
    output = tmp_path / "config.json"
    result = runner.invoke(app, ["init", "--output", str(output)])

    assert result.exit_code == 0
    assert set(json.loads(output.read_text())) == {"api_key", "shop_id"}


def test_validate_reports_shop(tmp_path):
    result = runner.invoke(app, ["validate", "--config", write_config(tmp_path)])

    assert result.exit_code == 0
    assert "1234567" in result.output


def test_missing_config_exits_with_error(tmp_path):
    result = runner.invoke(app, ["shops", "--config", str(tmp_path / "nope.json"), "--sandbox"])

    assert result.exit_code == 1
    assert "Config file not found" in result.output


def test_shops_in_sandbox(tmp_path):
    result = runner.invoke(app, ["shops", "--config", write_config(tmp_path), "--sandbox"])

    assert result.exit_code == 0
    assert "Mock Shop" in result.output


def test_products_in_sandbox_saves_json(tmp_path):
    output = tmp_path / "products.json"
    result = runner.invoke(app, [
        "products", "--config", write_config(tmp_path), "--sandbox", "--output", str(output),
    ])

    assert result.exit_code == 0
    saved = json.loads(output.read_text())
    assert saved["data"][0]["title"] == "Mock Mug 11oz"


def test_product_in_sandbox(tmp_path):
    result = runner.invoke(app, [
        "product", "5d39b159e7c48c000728c89f", "--config", write_config(tmp_path), "--sandbox",
    ])

    assert result.exit_code == 0
    assert "Mock Mug 11oz" in result.output


def test_register_webhooks_in_sandbox(tmp_path):
    result = runner.invoke(app, [
        "register-webhooks", "https://hooks.example.com/printify",
        "--secret", "s3cret",
        "--topic", "order:created",
        "--topic", "order:shipment:delivered",
        "--config", write_config(tmp_path),
        "--sandbox",
    ])

    assert result.exit_code == 0
    assert "order:created" in result.output
    assert "order:shipment:delivered" in result.output
    assert "order:sent-to-production" not in result.output


def test_shop_scoped_command_without_shop_id_fails(tmp_path):
    result = runner.invoke(app, [
        "webhooks", "--config", write_config(tmp_path, shop_id=None), "--sandbox",
    ])

    assert result.exit_code == 1
    assert "shop id" in result.output
