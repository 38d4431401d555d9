class RetryableError(Exception):
    pass

class RetryExceededError(Exception):
    pass

class SSLVerificationError(Exception):
    pass

class UnknownError(Exception):
    pass

class HttpStatusError(Exception):
    def __init__(self, url: str, status: int):
        self.url = url
        self.status = status
        super().__init__(f"Request to {url} failed with status {status}")
