import logging
import time
from typing import Any, Dict, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from order_service.core.exceptions import UpstreamServiceError
from order_service.core.logging import correlation_id, get_logger

ModelT = TypeVar("ModelT", bound=BaseModel)


class ServiceClient:
    """
    Base client for calling another service's JSON API.

    Handles URL building, correlation ID propagation and translation of
    transport failures and error responses into UpstreamServiceError.
    No request is retried.
    """

    service_name = "service"

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        http_client: Optional[httpx.Client] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the client.

        Args:
            base_url: Base URL of the target service, including any API prefix
            timeout: Request timeout in seconds
            http_client: Optional HTTP client for requests
            logger: Logger to use; defaults to the module logger
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.http_client = http_client or httpx.Client(timeout=timeout)
        self.logger = logger or get_logger(__name__)

    def close(self) -> None:
        self.http_client.close()

    def _request(
        self,
        method: str,
        path: str,
        json: Optional[Dict[str, Any]] = None,
        allow_not_found: bool = False
    ) -> Optional[Any]:
        """
        Make a request to the target service.

        Args:
            method: HTTP method (GET, PUT, POST, ...)
            path: Path relative to base_url
            json: Request body
            allow_not_found: Return None on 404 instead of raising

        Returns:
            Parsed JSON body, or None for 404 (when allowed) and empty bodies

        Raises:
            UpstreamServiceError: If the call fails or the service answers with an error
        """
        url = f"{self.base_url}{path}"
        headers = {"Accept": "application/json"}
        corr_id = correlation_id.get()
        if corr_id:
            headers["X-Correlation-ID"] = corr_id

        start_time = time.time()
        try:
            response = self.http_client.request(method, url, json=json, headers=headers)
        except httpx.RequestError as e:
            self.logger.error(f"Request to {self.service_name} failed: {method} {url}: {str(e)}")
            raise UpstreamServiceError(
                self.service_name,
                detail=f"Failed to connect to {self.service_name}: {str(e)}",
                original_exception=e
            )

        duration = time.time() - start_time
        self.logger.debug(
            f"{self.service_name} request {method} {url} completed with "
            f"{response.status_code} in {duration:.3f}s"
        )

        if response.status_code == 404 and allow_not_found:
            return None

        if response.is_error:
            message = self._parse_error_message(response)
            self.logger.error(
                f"{self.service_name} error on {method} {url}: {response.status_code} {message}"
            )
            raise UpstreamServiceError(
                self.service_name,
                detail=message,
                context={"upstream_status": response.status_code}
            )

        if not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamServiceError(
                self.service_name,
                detail=f"Invalid response from {self.service_name}",
                original_exception=e
            )

    def _parse_error_message(self, response: httpx.Response) -> str:
        """
        Extract the error message from a service error response.

        Args:
            response: Response object from httpx

        Returns:
            The upstream message, or a generic one if the body has none
        """
        try:
            body = response.json()
        except ValueError:
            return response.text or f"{self.service_name} returned status {response.status_code}"

        error = body.get("error") if isinstance(body, dict) else None
        if isinstance(error, dict) and error.get("message"):
            return error["message"]
        if isinstance(body, dict) and body.get("detail"):
            return str(body["detail"])
        return f"{self.service_name} returned status {response.status_code}"

    def _parse(self, model: Type[ModelT], data: Any) -> ModelT:
        """
        Validate a response body against the expected model.

        Raises:
            UpstreamServiceError: If the body does not match the model
        """
        try:
            return model.model_validate(data)
        except ValidationError as e:
            self.logger.error(f"Unexpected {model.__name__} payload from {self.service_name}: {str(e)}")
            raise UpstreamServiceError(
                self.service_name,
                detail=f"Invalid response from {self.service_name}",
                original_exception=e
            )
