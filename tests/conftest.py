import json

import pytest

from campaign_views.transform import normalize_campaigns


@pytest.fixture
def raw_dataset():
    return {
        "campaigns": [
            {
                "name": "Spring Sale",
                "spend": 1000,
                "revenue": 4000,
                "clicks": 500,
                "demographic_breakdown": [
                    {"gender": "Male", "age_group": "18-24",
                     "performance": {"impressions": 1000, "clicks": 100, "conversions": 10}},
                    {"gender": "Female", "age_group": "18-24",
                     "performance": {"impressions": 800, "clicks": 60, "conversions": 6}},
                    {"gender": "Male", "age_group": "25-34",
                     "performance": {"impressions": 1200, "clicks": 40, "conversions": 4}},
                ],
                "device_performance": [
                    {"device": "Mobile", "impressions": 2000, "clicks": 150, "conversions": 12,
                     "spend": 600, "revenue": 2500},
                    {"device": "Desktop", "impressions": 1000, "clicks": 50, "conversions": 8,
                     "spend": 400, "revenue": 1500},
                ],
                "regional_performance": [
                    {"region": "Dubai", "country": "UAE", "spend": 100, "revenue": 50},
                    {"region": "Al Ain", "country": "United Arab Emirates", "spend": 40, "revenue": 0},
                    {"region": " ", "country": " ", "spend": 5, "revenue": 5},
                ],
                "weekly_performance": [
                    {"week_start": "2023-01-02", "week_end": "2023-01-08", "impressions": 1000,
                     "clicks": 100, "conversions": 10, "spend": 100, "revenue": 400},
                    {"week_start": "2023-01-09", "week_end": "2023-01-15", "impressions": 500,
                     "clicks": 50, "conversions": 5, "spend": 50, "revenue": 150},
                ],
            },
            {
                "name": "Summer Push",
                "spend": 2000,
                "revenue": 3000,
                "clicks": 300,
                "demographic_breakdown": [
                    {"gender": "Female", "age_group": "45-54",
                     "performance": {"impressions": 600, "clicks": 30, "conversions": 3}},
                    {"gender": "Female", "age_group": "65+",
                     "performance": {"impressions": 400, "clicks": 20, "conversions": 1}},
                ],
                "device_performance": [
                    {"device": "Mobile", "impressions": 1000, "clicks": 80, "conversions": 5,
                     "spend": 1500, "revenue": 2000},
                ],
                "regional_performance": [
                    {"region": "Paris", "country": "France", "spend": 300, "revenue": 900},
                ],
                "weekly_breakdown": [
                    {"date": "2023-01-03", "cost": 200, "rev": 250,
                     "performance": {"impressions": 300, "clicks": 30, "conversions": 3}},
                ],
            },
            {"name": "Brand", "spend": 500, "revenue": 0, "clicks": 0},
        ]
    }


@pytest.fixture
def campaigns(raw_dataset):
    return normalize_campaigns(raw_dataset["campaigns"])


@pytest.fixture
def dataset_file(tmp_path, raw_dataset):
    path = tmp_path / "campaigns.json"
    path.write_text(json.dumps(raw_dataset), encoding="utf-8")
    return path
