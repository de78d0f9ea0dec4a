from __future__ import annotations

from image_helper.models import ContentRecord, Entity, File, Media


def test_record_json_parses_entity_kinds():
    record = ContentRecord.model_validate(
        {
            "fields": {
                "field_mixed": [
                    {"entity": {"entity_type": "file", "uri": "public://a.jpg"}},
                    {"entity": {"entity_type": "media", "bundle": "image", "fields": {}}},
                    {"entity": {"entity_type": "node", "id": "9", "label": "Other"}},
                    {"alt": "no entity"},
                ]
            }
        }
    )

    entities = [item.entity for item in record.get_field_values("field_mixed")]

    assert isinstance(entities[0], File)
    assert isinstance(entities[1], Media)
    assert isinstance(entities[2], Entity) and entities[2].entity_type == "node"
    assert entities[3] is None


def test_field_access():
    record = ContentRecord(fields={"field_image": []})

    assert record.has_field("field_image")
    assert not record.has_field("field_other")
    assert record.get_field_values("field_image") == []
    assert record.get_field_values("field_other") == []
