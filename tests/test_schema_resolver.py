from app.services.openapi.schema_resolver import resolve_schema


class TestResolveSchema:
    def test_none_node_resolves_to_none(self, pet_schemas):
        assert resolve_schema(None, pet_schemas) is None

    def test_component_reference_is_looked_up(self, pet_schemas):
        resolved = resolve_schema({"$ref": "#/components/schemas/Pet"}, pet_schemas)
        assert resolved is pet_schemas["Pet"]

    def test_missing_component_resolves_to_none(self, pet_schemas):
        assert resolve_schema({"$ref": "#/components/schemas/Foo"}, pet_schemas) is None

    def test_inline_node_is_returned_unchanged(self, pet_schemas):
        node = {"type": "string"}
        assert resolve_schema(node, pet_schemas) is node

    def test_external_reference_is_left_as_literal(self, pet_schemas):
        node = {"$ref": "https://example.com/schemas.json#/Pet"}
        assert resolve_schema(node, pet_schemas) is node

    def test_definitions_reference_is_left_as_literal(self, pet_schemas):
        node = {"$ref": "#/definitions/Pet"}
        assert resolve_schema(node, pet_schemas) is node

    def test_non_dict_component_table_is_tolerated(self):
        assert resolve_schema({"$ref": "#/components/schemas/Pet"}, None) is None

    def test_non_string_reference_is_not_followed(self, pet_schemas):
        node = {"$ref": 42}
        assert resolve_schema(node, pet_schemas) is node
