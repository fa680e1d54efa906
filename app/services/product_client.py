# app/services/product_client.py
from typing import Any, Dict, List

import requests

from app.utils.retry import http_retry
from app.utils.settings import PRODUCT_SERVICE_URL
from app.utils.logging import get_logger

logger = get_logger(__name__)


class ProductClient:
    def __init__(self, base_url: str | None = None, timeout: int = 2):
        self.base_url = (base_url or PRODUCT_SERVICE_URL).rstrip("/")
        self.timeout = timeout

    def _get(self, path: str) -> Any:
        url = f"{self.base_url}{path}"
        logger.info(f"ProductClient GET {url}")

        resp = requests.get(url, timeout=self.timeout)
        resp.raise_for_status()
        return resp.json()

    @http_retry()
    def fetch_products(self) -> List[Dict[str, Any]]:
        return self._get("/products")

    @http_retry()
    def fetch_product(self, product_id: int) -> Dict[str, Any] | None:
        #serwis zwraca null dla nieznanego id
        return self._get(f"/products/{product_id}")

    @http_retry()
    def fetch_price(self, product_id: int) -> float:
        return float(self._get(f"/products/{product_id}/price"))
