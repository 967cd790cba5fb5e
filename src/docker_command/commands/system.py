"""
System commands: version, info, ping
"""

from ..command import Command, Method


class Version(Command):
    """Docker version string"""

    path = '/version'
    method = Method.GET
    expected_status_code = 200

    def after_send(self, response):
        return response.json()['Version']


class Info(Command):
    """System-wide information"""

    path = '/info'
    method = Method.GET
    expected_status_code = 200

    def after_send(self, response):
        return response.json()


class Ping(Command):
    """Check that the daemon answers"""

    path = '/_ping'
    method = Method.GET
    expected_status_code = 200

    def after_send(self, response):
        return response.text
