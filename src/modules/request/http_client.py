import asyncio
import aiohttp
from typing import Optional, List
from pydantic import BaseModel

from .aio_client_cache import AioSessionCache
from .errors import HttpStatusError, RetryExceededError, RetryableError, SSLVerificationError, UnknownError
from ..logging import BaseLogger

class HttpClientConfig(BaseModel):
    timeout: int = 30
    verify_ssl: bool = True
    max_retries: int = 2
    backoff_factor: float = 0.5
    max_delay: Optional[int] = None  # Maximum delay in seconds between retries

class HttpClient:
    """Fetches remote text resources such as a published version manifest."""
    
    # Status codes that should trigger retries
    RETRY_STATUS_CODES: List[int] = [500, 502, 503, 504]

    def __init__(
        self,
        config: HttpClientConfig,
        logger: BaseLogger,
        session_cache: Optional[AioSessionCache] = None,
    ):
        """Initialize the client.
        
        Args:
            config: Timeout, SSL and retry configuration
            logger: Logger instance for logging failed attempts
            session_cache: Optional session cache for reusing HTTP sessions
        """
        self.config = config
        self.logger = logger
        self.session_cache = session_cache or AioSessionCache()

    async def fetch_text(self, url: str) -> str:
        """GET a URL and return the response body as text.
        
        Args:
            url: Absolute URL to fetch
            
        Returns:
            str: The decoded response body
            
        Raises:
            HttpStatusError: If the server answers with a non-retryable error status
            RetryExceededError: If max retries are exceeded
            SSLVerificationError: If SSL verification fails
            UnknownError: If the URL is invalid
        """
        client = await self.session_cache.get_session(
            timeout=self.config.timeout,
        )

        try:
            for attempt in range(self.config.max_retries + 1):
                try:
                    response = await client.request(
                        method="GET",
                        url=url,
                        ssl=self.config.verify_ssl
                    )
                    body = await response.text()

                    if response.status in self.RETRY_STATUS_CODES:
                        self.logger.log_warning(
                            f"Server returned a retryable status code {response.status}, "
                            f"attempt {attempt + 1} of {self.config.max_retries + 1}"
                        )
                        raise RetryableError("Server returned a retryable status code")

                    if response.status >= 400:
                        self.logger.log_error(f"Fetching {url} failed with status {response.status}")
                        raise HttpStatusError(url, response.status)

                    return body
                except RetryableError:
                    if attempt < self.config.max_retries:
                        await self._handle_retry_delay(attempt)
                        continue
                    error_msg = "Max retries exceeded"
                    self.logger.log_error(error_msg)
                    raise RetryExceededError(error_msg)
                except aiohttp.ClientSSLError as err:
                    # SSL errors are usually configuration issues, don't retry
                    self.logger.log_error(f"SSL error: {str(err)}, check your SSL configuration or try setting verify_ssl to False")
                    raise SSLVerificationError(f"SSL verification failed: {str(err)}")
                except aiohttp.ClientConnectorError as err:
                    self.logger.log_warning(f"Connection error: {str(err)}")
                    if attempt < self.config.max_retries:
                        await self._handle_retry_delay(attempt)
                        continue
                    error_msg = f"Connection failed after {self.config.max_retries + 1} attempts: {str(err)}"
                    self.logger.log_error(error_msg)
                    raise RetryExceededError(error_msg)
                except aiohttp.InvalidURL as err:
                    error_msg = f"Invalid URL: {str(err)}, check your URL configuration"
                    self.logger.log_error(error_msg)
                    raise UnknownError(f"Invalid URL configuration: {str(err)}")
                except aiohttp.ClientError as err:
                    self.logger.log_warning(f"Client error: {str(err)}")
                    if attempt < self.config.max_retries:
                        await self._handle_retry_delay(attempt)
                        continue
                    error_msg = f"Request failed after {self.config.max_retries + 1} attempts: {str(err)}"
                    self.logger.log_error(error_msg)
                    raise RetryExceededError(error_msg)
                except asyncio.TimeoutError:
                    self.logger.log_warning(f"Request to {url} timed out after {self.config.timeout} seconds")
                    if attempt < self.config.max_retries:
                        await self._handle_retry_delay(attempt)
                        continue
                    error_msg = f"Request timed out after {self.config.max_retries + 1} attempts"
                    self.logger.log_error(error_msg)
                    raise RetryExceededError(error_msg)
                except HttpStatusError:
                    raise
                except Exception as err:
                    error_msg = f"Unexpected error: {str(err)}"
                    self.logger.log_error(error_msg)
                    raise UnknownError(error_msg)

            raise UnknownError("Request failed in an unexpected way - reached end of retry loop")
        finally:
            await self.session_cache.close()

    async def _handle_retry_delay(self, attempt: int) -> None:
        """Sleep with exponential backoff before the next attempt.
        
        Args:
            attempt: Current retry attempt number
        """
        delay = self.config.backoff_factor * (2 ** attempt)
        if self.config.max_delay:
            delay = min(delay, self.config.max_delay)
        self.logger.log_debug(f"Using exponential backoff delay: {delay} seconds")
        await asyncio.sleep(delay)

    async def close(self):
        """Close the client session cache."""
        await self.session_cache.close()
