"""
Command lifecycle for Docker Engine API calls

A command is one request/response exchange: build the URL and options,
let a pre-send hook inspect or veto the request, send it, check the
status code and let a post-send hook turn the response into a value.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, FrozenSet, Iterable, Optional, Union

from .exceptions import RequestCanceled, ResponseNotValid, UnexpectedStatusCode

logger = logging.getLogger(__name__)

# Descriptors already warned about an unsatisfiable status code set
_warned_descriptors = set()


class Method(str, enum.Enum):
    """HTTP verbs used by commands"""
    GET = 'GET'
    POST = 'POST'
    PUT = 'PUT'
    DELETE = 'DELETE'


StatusCodes = Union[None, int, str, Iterable[Union[int, str]]]


def normalize_status_codes(codes: StatusCodes) -> Optional[FrozenSet[int]]:
    """Turn a single code or a collection of codes into a frozenset of ints"""
    if codes is None:
        return None
    if isinstance(codes, (int, str)):
        return frozenset({int(codes)})
    return frozenset(int(code) for code in codes)


@dataclass(frozen=True)
class CommandDescriptor:
    """Static metadata of a command"""
    path: str
    method: Method = Method.GET
    expected_status_codes: Optional[FrozenSet[int]] = None
    min_version: Optional[str] = None
    max_version: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.method, Method):
            object.__setattr__(self, 'method', Method(self.method.upper()))
        codes = normalize_status_codes(self.expected_status_codes)
        object.__setattr__(self, 'expected_status_codes', codes)
        key = (self.method, self.path, codes)
        if codes is not None and len(codes) > 1 and key not in _warned_descriptors:
            _warned_descriptors.add(key)
            logger.warning(
                f"{self.method.value} {self.path}: every expected status code "
                f"{sorted(codes)} must equal the response status, this check can never pass"
            )


class Veto:
    """Explicit rejection returned by a hook instead of False"""

    def __init__(self, reason: Optional[str] = None):
        self.reason = reason

    def __repr__(self):
        return f"<Veto: {self.reason}>"

    def __bool__(self):
        return False


def _is_veto(value: Any) -> bool:
    return value is False or isinstance(value, Veto)


class CommandOutput:
    """Request, response and extracted value of a successful command"""

    __slots__ = ('_request', '_response', '_value')

    def __init__(self, request, response, value):
        self._request = request
        self._response = response
        self._value = value

    @property
    def request(self):
        return self._request

    @property
    def response(self):
        return self._response

    @property
    def value(self):
        return self._value

    def __repr__(self):
        return f"<CommandOutput: {self._request!r} -> {self._response!r}>"


def build_url(path: str, api_version: Optional[str] = None) -> str:
    """
    Build the request URL, prefixed with the API version when one is given

    Args:
        path: Endpoint path, with or without leading slash
        api_version: Version such as '1.12' or 'v1.12'

    Returns:
        '/v1.12/containers/create' or '/containers/create'
    """
    path = path.lstrip('/')
    if api_version:
        api_version = str(api_version)
        if not api_version.startswith('v'):
            api_version = f"v{api_version}"
        return f"/{api_version}/{path}"
    return f"/{path}"


def check_status_code(expected: Optional[FrozenSet[int]], status_code: int) -> bool:
    """
    Compare a response status code with the expected ones

    No expectation always matches. Otherwise the status must equal every
    expected code, so a set with several distinct codes never matches.
    """
    if expected is None:
        return True
    return all(int(status_code) == code for code in expected)


OptionsHook = Callable[[], Optional[Dict[str, Any]]]
Hook = Callable[[Any], Any]


def _create_request(transport, descriptor: CommandDescriptor,
                    get_options: Optional[OptionsHook], api_version: Optional[str]):
    options = get_options() if get_options is not None else {}
    url = build_url(descriptor.path, api_version)
    return transport.create_request(descriptor.method.value, url, options or {})


def run_command(transport, descriptor: CommandDescriptor,
                get_options: Optional[OptionsHook] = None,
                before_send: Optional[Hook] = None,
                after_send: Optional[Hook] = None,
                api_version: Optional[str] = None) -> CommandOutput:
    """
    Execute one request/response cycle

    Args:
        transport: Object with create_request(method, url, options) and send(request)
        descriptor: Command metadata
        get_options: Returns body, headers and params for the request
        before_send: Called with the request; False or a Veto cancels it
        after_send: Called with the response; its return value is the result,
                    False or a Veto rejects the response
        api_version: API version used as URL prefix

    Returns:
        CommandOutput

    Raises:
        RequestCanceled: The request could not be built, or the pre-send
                         hook vetoed or raised
        UnexpectedStatusCode: The status code does not match the descriptor
        ResponseNotValid: Sending failed or the post-send hook vetoed or raised
    """
    try:
        request = _create_request(transport, descriptor, get_options, api_version)
    except Exception as e:
        raise RequestCanceled(f"Request could not be built: {e}") from e
    logger.debug(f"Built request {request!r}")

    # Before send
    if before_send is not None:
        logger.debug(f"Running pre-send hook for {request!r}")
        try:
            approval = before_send(request)
        except Exception as e:
            raise RequestCanceled(f"Request was canceled before being sent: {e}") from e
        if _is_veto(approval):
            reason = getattr(approval, 'reason', None)
            message = "Request was canceled before being sent"
            raise RequestCanceled(f"{message}: {reason}" if reason else message)

    # Send
    try:
        response = transport.send(request)
    except Exception as e:
        raise ResponseNotValid(f"Response is not valid: {e}") from e

    # Status code
    if not check_status_code(descriptor.expected_status_codes, response.status_code):
        logger.debug(
            f"Status {response.status_code} does not match "
            f"{sorted(descriptor.expected_status_codes)} for {request!r}"
        )
        raise UnexpectedStatusCode(response)

    # After send
    value = True
    if after_send is not None:
        logger.debug(f"Running post-send hook for {response!r}")
        try:
            value = after_send(response)
        except Exception as e:
            raise ResponseNotValid(f"Response is not valid: {e}") from e
        if _is_veto(value):
            reason = getattr(value, 'reason', None)
            raise ResponseNotValid(f"Response is not valid: {reason}" if reason
                                   else "Response is not valid")

    return CommandOutput(request, response, value)


def debug_command(transport, descriptor: CommandDescriptor,
                  get_options: Optional[OptionsHook] = None,
                  before_send: Optional[Hook] = None,
                  api_version: Optional[str] = None) -> str:
    """
    Build the request and run the pre-send hook, then render the request
    instead of sending it. Hook failures are reported in the returned text.
    """
    output = ''
    try:
        request = _create_request(transport, descriptor, get_options, api_version)
        approval = before_send(request) if before_send is not None else True
        if _is_veto(approval):
            output += "Request creation was canceled. But here are the params :\n\n"
        output += str(request)
    except Exception as e:
        output += f"Request creation was canceled. Reason : {e}\n"

    return output


class Command:
    """
    Base class for commands

    Subclasses set path, method and expected_status_code and override the
    hooks they need.
    """

    path = ''
    method = Method.GET
    expected_status_code: StatusCodes = None
    min_version = None
    max_version = None

    @property
    def descriptor(self) -> CommandDescriptor:
        return CommandDescriptor(
            path=self.path,
            method=self.method,
            expected_status_codes=self.expected_status_code,
            min_version=self.min_version,
            max_version=self.max_version
        )

    def get_options(self) -> Dict[str, Any]:
        """Body, headers and query params of the request"""
        return {}

    def before_send(self, request) -> Any:
        """Inspect or modify the request; return False to cancel it"""
        return True

    def after_send(self, response) -> Any:
        """Extract the result from the response; return False to reject it"""
        return True

    def run(self, client, api_version: Optional[str] = None) -> CommandOutput:
        """
        Run the command through a DockerClient

        Args:
            client: DockerClient
            api_version: Overrides the client's default API version
        """
        return run_command(
            client.http, self.descriptor,
            get_options=self.get_options,
            before_send=self.before_send,
            after_send=self.after_send,
            api_version=api_version or client.api_version
        )

    def debug(self, client, api_version: Optional[str] = None) -> str:
        """Render the request this command would send"""
        return debug_command(
            client.http, self.descriptor,
            get_options=self.get_options,
            before_send=self.before_send,
            api_version=api_version or client.api_version
        )

    def __repr__(self):
        method = self.method.value if isinstance(self.method, Method) else str(self.method).upper()
        return f"<{self.__class__.__name__}: {method} {self.path}>"
