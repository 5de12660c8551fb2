"""Tests for the FastAPI surface (routers.recolorTools, main)."""

import importlib

import pytest
from fastapi.testclient import TestClient

from main import app

BASIC = ['#FF0000', '#00FF00', '#0000FF', '#FFFF00', '#00FFFF', '#FF00FF', '#000000', '#FFFFFF', '#808080']
BRAND = ['#FFFFFF', '#5553FF', '#EF2E98', '#4ADE80']


@pytest.fixture
def client():
    return TestClient(app)


class TestHealth:
    def test_health(self, client):
        resp = client.get('/health')
        assert resp.status_code == 200
        assert resp.json()['status'] == 'healthy'


class TestNormalizeEndpoint:
    def test_named(self, client):
        resp = client.post('/normalize_color', json={'code': 'Red'})
        assert resp.status_code == 200
        assert resp.json() == {'success': True, 'message': '#ff0000'}

    def test_no_paint_rejected(self, client):
        resp = client.post('/normalize_color', json={'code': 'none'})
        assert resp.status_code == 400


class TestMatchEndpoint:
    def test_hue_priority(self, client):
        resp = client.post('/api/match', json={'colors': ['#FEF9C3', 'none'], 'palette': BASIC, 'strategy': 'v3'})
        assert resp.status_code == 200
        body = resp.json()
        assert body['mapping'] == {'#fef9c3': '#FFFF00'}
        assert body['detected_colors'] == ['#fef9c3']
        assert set(body['distances']) == {'#fef9c3'}

    def test_detected_colors_sorted_and_deduplicated(self, client):
        resp = client.post('/api/match', json={'colors': ['#00ff00', 'red', '#FF0000'], 'palette': BASIC, 'strategy': 'v1'})
        assert resp.status_code == 200
        body = resp.json()
        assert body['detected_colors'] == ['#00ff00', '#ff0000']
        assert body['mapping'] == {'#00ff00': '#00FF00', '#ff0000': '#FF0000'}

    def test_default_strategy_is_lab(self, client):
        resp = client.post('/api/match', json={'colors': ['#FEF9C3'], 'palette': BASIC})
        assert resp.json()['mapping'] == {'#fef9c3': '#FFFFFF'}

    def test_empty_palette(self, client):
        resp = client.post('/api/match', json={'colors': ['#ff0000'], 'palette': []})
        assert resp.status_code == 400
        assert 'must not be empty' in resp.json()['detail']

    def test_invalid_palette_entry(self, client):
        resp = client.post('/api/match', json={'colors': ['#ff0000'], 'palette': ['#fff', '#000000', 'red']})
        assert resp.status_code == 400
        assert resp.json()['detail'] == 'Invalid hex colors: #fff, red'

    def test_unknown_strategy(self, client):
        resp = client.post('/api/match', json={'colors': ['#ff0000'], 'palette': BASIC, 'strategy': 'v9'})
        assert resp.status_code == 422


class TestRecolorEndpoint:
    def test_v1(self, client):
        elements = [{'fill': '#FF0000'}, {'style': 'fill:#00FF00;stroke:none'}]
        resp = client.post('/api/recolor/v1', json={'elements': elements, 'palette': BRAND})
        assert resp.status_code == 200
        body = resp.json()
        assert body['detected_colors'] == ['#00ff00', '#ff0000']
        assert body['mapping'] == {'#00ff00': '#4ADE80', '#ff0000': '#EF2E98'}
        assert body['distances'] is None
        assert body['elements'] == [{'fill': '#EF2E98'}, {'style': 'fill:#4ADE80; stroke:none'}]

    def test_v2_has_distances(self, client):
        resp = client.post('/api/recolor/v2', json={'elements': [{'fill': '#ffffff'}], 'palette': BRAND})
        body = resp.json()
        assert body['mapping'] == {'#ffffff': '#FFFFFF'}
        assert body['distances'] == {'#ffffff': 0.0}

    def test_unknown_strategy(self, client):
        resp = client.post('/api/recolor/v9', json={'elements': [{'fill': 'red'}], 'palette': BRAND})
        assert resp.status_code == 400
        assert 'v9' in resp.json()['detail']

    def test_invalid_palette(self, client):
        resp = client.post('/api/recolor/v1', json={'elements': [{'fill': 'red'}], 'palette': ['#GGGGGG']})
        assert resp.status_code == 400


class TestSettings:
    def test_bad_port_does_not_break_import(self, monkeypatch):
        monkeypatch.setenv('PORT', 'not-a-port')
        import main

        reloaded = importlib.reload(main)
        assert reloaded.app.title == 'Recolor Tools MCP Server'
