"""
Shared pytest fixtures for the DONKI EDA test suite.
"""

import pytest
from typing import Any, Dict, List

from donki_eda.core.config import Settings
from donki_eda.services.analyzer import DatasetAnalyzer


@pytest.fixture
def eda_settings() -> Settings:
    """Provide default settings independent of the environment."""
    return Settings()


@pytest.fixture
def analyzer(eda_settings: Settings) -> DatasetAnalyzer:
    """Provide an analyzer built from default settings."""
    return DatasetAnalyzer(settings=eda_settings)


@pytest.fixture
def sample_flare_events() -> List[Dict[str, Any]]:
    """Provide sample solar flare (FLR) records."""
    return [
        {
            "flrID": "2024-01-01T10:00:00-FLR-001",
            "beginTime": "2024-01-01T10:00Z",
            "peakTime": "2024-01-01T10:12Z",
            "endTime": "2024-01-01T10:30Z",
            "classType": "M2.5",
            "sourceLocation": "S14W01",
            "activeRegionNum": 13536,
            "link": "https://kauai.ccmc.gsfc.nasa.gov/DONKI/view/FLR/1/-1",
        },
        {
            "flrID": "2024-01-02T04:00:00-FLR-001",
            "beginTime": "2024-01-02T04:00Z",
            "peakTime": "2024-01-02T04:20Z",
            "endTime": "2024-01-02T05:00Z",
            "classType": "X1.1",
            "sourceLocation": "N16E65",
            "activeRegionNum": 13537,
            "link": "https://kauai.ccmc.gsfc.nasa.gov/DONKI/view/FLR/2/-1",
        },
        {
            "flrID": "2024-01-03T18:00:00-FLR-001",
            "beginTime": "2024-01-03T18:00Z",
            "peakTime": "2024-01-03T18:05Z",
            "endTime": None,
            "classType": "C3.2",
            "sourceLocation": "N05W20",
            "activeRegionNum": None,
            "link": "https://kauai.ccmc.gsfc.nasa.gov/DONKI/view/FLR/3/-1",
        },
    ]


@pytest.fixture
def sample_cme_events() -> List[Dict[str, Any]]:
    """Provide sample coronal mass ejection (CME) records."""
    return [
        {
            "activityID": "2024-01-01T00:00:00-CME-001",
            "startTime": "2024-01-01T00:00Z",
            "sourceLocation": "N16E65",
            "note": "Partial halo seen in C2 and C3.",
            "cmeAnalyses": [
                {
                    "isMostAccurate": False,
                    "speed": 500.0,
                    "halfAngle": 30.0,
                    "type": "S",
                    "note": "Early estimate.",
                },
                {
                    "isMostAccurate": True,
                    "speed": 800.0,
                    "halfAngle": 45.0,
                    "type": "C",
                    "note": "Measured from STEREO A.",
                    "enlilList": [{"modelCompletionTime": "2024-01-01T06:00Z"}],
                },
            ],
            "linkedEvents": [{"activityID": "2024-01-01T10:00:00-FLR-001"}],
        },
        {
            "activityID": "2024-01-02T12:00:00-CME-001",
            "startTime": "2024-01-02T12:00Z",
            "sourceLocation": "",
            "note": "",
            "cmeAnalyses": [
                {"isMostAccurate": False, "speed": 350.0, "halfAngle": 20.0, "type": "S"},
            ],
            "linkedEvents": None,
        },
        {
            "activityID": "2024-01-03T08:00:00-CME-001",
            "startTime": "2024-01-03T08:00Z",
            "sourceLocation": "S20W10",
            "note": "No analysis available.",
            "cmeAnalyses": None,
        },
    ]


@pytest.fixture
def sample_storm_events() -> List[Dict[str, Any]]:
    """Provide sample geomagnetic storm (GST) records."""
    return [
        {
            "gstID": "2024-01-01T03:00:00-GST-001",
            "startTime": "2024-01-01T03:00Z",
            "allKpIndex": [
                {"observedTime": "2024-01-01T03:00Z", "kpIndex": 6.33, "source": "NOAA"},
                {"observedTime": "2024-01-01T06:00Z", "kpIndex": 7.0, "source": "NOAA"},
            ],
        },
        {
            "gstID": "2024-01-05T09:00:00-GST-001",
            "startTime": "2024-01-05T09:00Z",
            "allKpIndex": [
                {"observedTime": "2024-01-05T09:00Z", "kpIndex": 5.67, "source": "NOAA"},
            ],
        },
        {
            "gstID": "2024-01-09T00:00:00-GST-001",
            "startTime": "2024-01-09T00:00Z",
            "allKpIndex": [],
        },
    ]
