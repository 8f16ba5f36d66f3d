# app/client/api_client.py
import requests

from app.utils.settings import API_BASE_URL, HTTP_TIMEOUT
from app.utils.logging import get_logger

logger = get_logger(__name__)


class ApiError(Exception):
    """Blad zwrocony przez API, message nadaje sie do pokazania uzytkownikowi."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _error_message(resp) -> str:
    try:
        body = resp.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        message = body.get("detail") or body.get("message")
        # 422 z FastAPI: detail to lista bledow walidacji
        if isinstance(message, list):
            message = "; ".join(
                str(item.get("msg")) for item in message if isinstance(item, dict) and item.get("msg")
            )
        if isinstance(message, str) and message:
            return message

    return f"{resp.status_code}: {resp.text or resp.reason}"


class ApiClient:
    """
    Klient HTTP dla endpointow uploadu i produktow.
    Bez retry - kazdy blad konczy probe, ponawia uzytkownik.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: int | None = None,
        session: requests.Session | None = None,
    ):
        self.base_url = (base_url or API_BASE_URL).rstrip("/")
        self.timeout = timeout or HTTP_TIMEOUT
        self.session = session or requests.Session()

    def _request(self, method: str, path: str, **kwargs):
        url = f"{self.base_url}{path}"
        logger.info(f"ApiClient {method} {url}")

        resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
        if not resp.ok:
            raise ApiError(_error_message(resp), resp.status_code)
        return resp

    def upload_image(self, filename: str, content: bytes, content_type: str) -> dict:
        """POST /api/upload (multipart, pole `image`) -> {imageUrl, imageData}."""
        try:
            resp = self._request(
                "POST",
                "/api/upload",
                files={"image": (filename, content, content_type)},
            )
        except ApiError as e:
            raise ApiError("Failed to upload image", e.status_code) from e

        data = resp.json()
        if not isinstance(data, dict):
            raise ApiError("Failed to upload image", resp.status_code)
        if not data.get("success"):
            raise ApiError(data.get("message") or "Failed to upload image", resp.status_code)

        return data

    def create_product(self, payload: dict) -> dict:
        return self._request("POST", "/api/products", json=payload).json()

    def update_product(self, product_id: int, payload: dict) -> dict:
        return self._request("PUT", f"/api/products/{product_id}", json=payload).json()

    def list_products(self, seller_id: int | None = None) -> list:
        params = {"sellerId": seller_id} if seller_id is not None else None
        return self._request("GET", "/api/products", params=params).json()
