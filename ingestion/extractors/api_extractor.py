"""
Rankings feed extractor.

Issues a single GET against the configured feed URL and validates that the
body is a JSON array of node records. There is no retry here: the scheduler
retries on its next tick and a manual trigger reports the failure instead.
"""

import logging
from typing import List

import httpx
from pydantic import ValidationError

from core.exceptions import DecodeError, HttpStatusError, TransportError
from schemas.node import ExternalNode

logger = logging.getLogger(__name__)

# Bytes of an error response body kept for diagnostics
RESPONSE_BODY_LIMIT = 500


class NodeAPIExtractor:
    """
    Fetch node records from the rankings API.
    
    Attributes:
        api_url: Feed endpoint
        timeout: Request timeout in seconds (default: 30.0)
    """
    
    def __init__(self, api_url: str, timeout: float = 30.0):
        self.api_url = api_url
        self.timeout = timeout
    
    async def fetch_data(self) -> List[ExternalNode]:
        """
        Fetch and decode the feed.
        
        Returns:
            Validated node records in feed order
        
        Raises:
            TransportError: The feed could not be reached or timed out
            HttpStatusError: The feed answered with a non-2xx status
            DecodeError: The body is not a JSON array of node records
        """
        logger.info(f"Fetching from API: {self.api_url}")
        
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(self.api_url)
        except httpx.TimeoutException as e:
            raise TransportError(
                f"Request to {self.api_url} timed out",
                context={"api_url": self.api_url, "timeout": self.timeout},
                original_exception=e
            )
        except httpx.HTTPError as e:
            raise TransportError(
                f"API request to {self.api_url} failed",
                context={"api_url": self.api_url},
                original_exception=e
            )
        
        if not response.is_success:
            body = response.text[:RESPONSE_BODY_LIMIT]
            logger.error(f"API non-success {response.status_code}: {body}")
            raise HttpStatusError(
                f"API error: status {response.status_code}",
                status_code=response.status_code,
                response_body=body,
                context={"api_url": self.api_url}
            )
        
        return self.decode(response)
    
    def decode(self, response: httpx.Response) -> List[ExternalNode]:
        """Decode a successful response into node records."""
        try:
            data = response.json()
        except ValueError as e:
            raise DecodeError(
                "Failed to parse JSON response",
                context={
                    "api_url": self.api_url,
                    "response_body": response.text[:RESPONSE_BODY_LIMIT]
                },
                original_exception=e
            )
        
        if not isinstance(data, list):
            raise DecodeError(
                f"Expected a JSON array, got {type(data).__name__}",
                context={"api_url": self.api_url}
            )
        
        nodes = []
        for index, record in enumerate(data):
            try:
                nodes.append(ExternalNode.model_validate(record))
            except ValidationError as e:
                raise DecodeError(
                    "Node record does not match the expected shape",
                    context={"api_url": self.api_url, "record_index": index},
                    original_exception=e
                )
        
        logger.info(f"Fetched {len(nodes)} node records")
        return nodes
