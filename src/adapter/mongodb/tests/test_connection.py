"""Tests for the MongoDB client lifecycle helpers."""

import importlib
import logging
import unittest
from unittest.mock import patch, MagicMock

from pymongo.errors import ServerSelectionTimeoutError

from adapter.mongodb import connection


class TestConnect(unittest.TestCase):

    def test_returns_none_without_url(self):
        self.assertIsNone(connection.connect(None))

    @patch('adapter.mongodb.connection.MongoClient')
    def test_connects_and_pings(self, mock_client_class):
        mock_client = MagicMock()
        mock_client_class.return_value = mock_client

        client = connection.connect('mongodb://localhost:27017')

        self.assertIs(client, mock_client)
        mock_client.admin.command.assert_called_once_with('ping')
        kwargs = mock_client_class.call_args.kwargs
        self.assertFalse(kwargs['retryReads'])
        self.assertFalse(kwargs['retryWrites'])

    @patch('adapter.mongodb.connection.MongoClient')
    def test_returns_none_when_unreachable(self, mock_client_class):
        mock_client_class.return_value.admin.command.side_effect = ServerSelectionTimeoutError("timeout")

        self.assertIsNone(connection.connect('mongodb://unreachable:27017'))


class TestPing(unittest.TestCase):

    def test_none_client(self):
        self.assertFalse(connection.ping(None))

    def test_healthy(self):
        self.assertTrue(connection.ping(MagicMock()))

    def test_failure(self):
        client = MagicMock()
        client.admin.command.side_effect = ServerSelectionTimeoutError("timeout")

        self.assertFalse(connection.ping(client))


class TestClose(unittest.TestCase):

    def test_closes_client(self):
        client = MagicMock()
        connection.close(client)
        client.close.assert_called_once()

    def test_none_is_noop(self):
        connection.close(None)


class TestGetDatabase(unittest.TestCase):

    def test_uses_configured_database_name(self):
        client = MagicMock()
        connection.get_database(client)
        client.__getitem__.assert_called_once_with(connection.DATABASE_NAME)


class TestDriverLogging(unittest.TestCase):

    def test_import_leaves_pymongo_log_level_alone(self):
        """Driver log level is owned by utils.logging.setup_structured_logging."""
        pymongo_logger = logging.getLogger('pymongo')
        saved = pymongo_logger.level
        pymongo_logger.setLevel(logging.DEBUG)
        try:
            importlib.reload(connection)
            self.assertEqual(pymongo_logger.level, logging.DEBUG)
        finally:
            pymongo_logger.setLevel(saved)


if __name__ == '__main__':
    unittest.main()
