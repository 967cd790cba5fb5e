"""
Docker Command Exceptions
"""


class DockerException(Exception):
    """Base Docker exception"""
    pass


class RequestCanceled(DockerException):
    """Request was canceled before being sent"""
    pass


class ResponseNotValid(DockerException):
    """Response could not be obtained or was rejected"""
    pass


class UnexpectedStatusCode(ResponseNotValid):
    """Response status code does not match the expected one"""
    
    def __init__(self, response, message=None):
        self.response = response
        self.status_code = getattr(response, 'status_code', None)
        if message is None:
            message = f"Unexpected status code: {self.status_code}"
            reason = getattr(response, 'reason', '')
            if reason:
                message = f"{message} {reason}"
        super().__init__(message)
