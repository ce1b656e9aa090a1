from fastapi.testclient import TestClient

from roster.main import create_app


def test_unexpected_errors_use_json_envelope(database) -> None:
    app = create_app(database)

    @app.get('/api/boom')
    def boom():
        raise OverflowError('Python int too large to convert to SQLite INTEGER')

    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.get('/api/boom')

    assert response.status_code == 500
    assert response.json() == {'error': 'Internal server error'}


def test_unknown_route_uses_json_envelope(client) -> None:
    response = client.get('/api/nope')

    assert response.status_code == 404
    assert response.json() == {'error': 'Not Found'}
