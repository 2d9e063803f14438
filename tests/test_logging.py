import json
import logging
import unittest

from bizhub.core.logging import JsonFormatter, build_handler
from bizhub.routers.common import operation_name


def _record(message, *args, **extra):
    record = logging.LogRecord("bizhub.test", logging.INFO, __file__, 1, message, args, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class JsonFormatterTest(unittest.TestCase):
    def test_context_fields_are_included(self):
        line = JsonFormatter().format(
            _record("rpc %s -> %s", "createTask", 200, operation="createTask", status_code=200)
        )
        payload = json.loads(line)
        self.assertEqual(payload["message"], "rpc createTask -> 200")
        self.assertEqual(payload["operation"], "createTask")
        self.assertEqual(payload["status_code"], 200)
        self.assertEqual(payload["level"], "INFO")
        self.assertNotIn("entity_type", payload)

    def test_missing_reference_is_omitted(self):
        payload = json.loads(JsonFormatter().format(_record("recorded", entity_type=None, entity_id=None)))
        self.assertNotIn("entity_type", payload)
        self.assertNotIn("entity_id", payload)

    def test_build_handler_picks_formatter(self):
        self.assertIsInstance(build_handler(True).formatter, JsonFormatter)
        self.assertNotIsInstance(build_handler(False).formatter, JsonFormatter)


class OperationNameTest(unittest.TestCase):
    def test_rpc_paths(self):
        self.assertEqual(operation_name("/rpc/createTask"), "createTask")
        self.assertIsNone(operation_name("/rpc/"))
        self.assertIsNone(operation_name("/health"))


if __name__ == "__main__":
    unittest.main()
