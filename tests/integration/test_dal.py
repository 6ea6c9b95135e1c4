"""
Integration tests for the Data Access Layer (DAL).

This module tests the DynamoDB implementation of the DAL against moto to
check the key layout and the upsert behaviour of cargo records.
"""

from decimal import Decimal

import pytest

from midworld.dal import CargoDalHandler, get_dal_handler
from midworld.dal.dynamodb_handler import CargoStorageError, DynamoDBHandler
from midworld.models.cargo import CargoRecord


@pytest.mark.integration
class TestDynamoDBHandler:
    """Integration tests for DynamoDB handler."""

    def test_factory_returns_dynamodb_handler(self, dynamodb_table):
        dal = get_dal_handler("test-waystation-table")

        assert isinstance(dal, DynamoDBHandler)
        assert isinstance(dal, CargoDalHandler)

    def test_write_only_handler_satisfies_protocol(self):
        class WriteOnlyDal:
            def put_cargo_record(self, record):
                return record

        assert isinstance(WriteOnlyDal(), CargoDalHandler)

    def test_put_cargo_record(self, dynamodb_table):
        dal = DynamoDBHandler("test-waystation-table")
        record = CargoRecord.create(cargo_id="TEST-1", location="DOCK-Z")

        dal.put_cargo_record(record)

        item = dynamodb_table.get_item(Key={"partitionKey": "CARGO#TEST-1", "sortKey": "METADATA"})["Item"]
        assert item["cargoId"] == "TEST-1"
        assert item["location"] == "DOCK-Z"
        assert item["status"] == "IN_STORAGE"
        assert item["updatedAt"] == record.updated_at

    def test_second_write_overwrites(self, dynamodb_table):
        dal = DynamoDBHandler("test-waystation-table")

        dal.put_cargo_record(CargoRecord.create(cargo_id="TEST-1", location="DOCK-Z"))
        dal.put_cargo_record(CargoRecord.create(cargo_id="TEST-1", location="DOCK-A"))

        items = dynamodb_table.scan()["Items"]
        assert len(items) == 1
        assert items[0]["location"] == "DOCK-A"

    def test_float_extras_are_stored_as_decimal(self, dynamodb_table):
        dal = DynamoDBHandler("test-waystation-table")

        dal.put_cargo_record(CargoRecord.create(cargo_id="TEST-5", location="DOCK-Z", extra_fields={"weightKg": 12.5}))

        item = dal.get_cargo_record("TEST-5")
        assert item["weightKg"] == Decimal("12.5")

    def test_get_cargo_record_not_found(self, dynamodb_table):
        dal = DynamoDBHandler("test-waystation-table")

        assert dal.get_cargo_record("NOPE") is None

    def test_missing_table_raises_storage_error(self, aws_mock):
        dal = DynamoDBHandler("no-such-table")

        with pytest.raises(CargoStorageError) as exc_info:
            dal.put_cargo_record(CargoRecord.create(cargo_id="TEST-1", location="DOCK-Z"))

        assert exc_info.value.operation == "put_item"
        assert exc_info.value.table_name == "no-such-table"
        assert exc_info.value.user_message == "Internal server error"
