import json

import pandas as pd
import pytest

from campaign_views.run import main


def test_exports_selected_view(dataset_file, tmp_path):
    out = tmp_path / "out"

    main([str(dataset_file), "--view", "weekly", "--output", str(out), "--format", "csv"])

    weekly = pd.read_csv(out / "weekly.csv")
    assert weekly["week"].tolist() == ["2023-W01", "2023-W02"]
    assert not (out / "devices.csv").exists()


def test_validate_passes(dataset_file):
    main([str(dataset_file), "--validate", "--env", "development"])


def test_missing_dataset_exits(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main([str(tmp_path / "missing.json")])

    assert exc.value.code == 1


def test_unknown_environment_exits(dataset_file):
    with pytest.raises(SystemExit) as exc:
        main([str(dataset_file), "--env", "qa"])

    assert exc.value.code == 1


def test_malformed_geo_config_exits(dataset_file, tmp_path):
    geo_config = tmp_path / "geo.yaml"
    geo_config.write_text("city_coords:\n  Foo: 5\n", encoding="utf-8")

    with pytest.raises(SystemExit) as exc:
        main([str(dataset_file), "--geo-config", str(geo_config)])

    assert exc.value.code == 1


def test_validate_accepts_duplicate_campaign_names(tmp_path):
    promo = {"name": "Promo", "spend": 100, "revenue": 300, "clicks": 10, "demographic_breakdown": [
        {"gender": "Male", "age_group": "18-24", "performance": {"impressions": 100, "clicks": 10}},
    ]}
    path = tmp_path / "promo.json"
    path.write_text(json.dumps({"campaigns": [promo, promo]}), encoding="utf-8")

    main([str(path), "--validate", "--view", "demographic"])
