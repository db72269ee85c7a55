from flask.testing import FlaskClient

from inputcatalog.backend.version import get_project_version


def test_health_endpoint_reports_status_and_catalogues(client: FlaskClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200

    payload = response.get_json()
    assert payload["status"] == "ok"
    assert payload["version"] == get_project_version()
    assert payload["active_locale"] == "en"
    assert payload["locales"] == ["en", "hr_HR"]
