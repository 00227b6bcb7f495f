from app.services.mock.mock_route_table import MockRouteTable
from app.utils.url_converter import build_path_pattern, convert_path_template


class TestUrlConverter:
    def test_convert_path_template(self):
        assert convert_path_template("/pets/{id}") == "/pets/:id"
        assert convert_path_template("/users/{userId}/posts/{postId}") == "/users/:userId/posts/:postId"

    def test_build_path_pattern(self):
        pattern, group_names = build_path_pattern("/pets/{pet-id}/photos")
        matched = pattern.match("/pets/42/photos")

        assert matched is not None
        assert {group_names[k]: v for k, v in matched.groupdict().items()} == {"pet-id": "42"}
        assert pattern.match("/pets/42/photos/") is not None
        assert pattern.match("/pets/42/other") is None
        assert pattern.match("/pets//photos") is None

    def test_literal_characters_are_escaped(self):
        pattern, _ = build_path_pattern("/files/{name}.json")
        assert pattern.match("/files/report.json") is not None
        assert pattern.match("/files/reportxjson") is None


class TestMockRouteTable:
    def test_one_route_per_operation(self, petstore_document):
        table = MockRouteTable.from_document(petstore_document)
        assert table.describe() == ["GET /pets", "POST /pets", "GET /pets/:id", "DELETE /pets/:id"]
        assert len(table) == 4

    def test_match_extracts_path_params(self, petstore_document):
        table = MockRouteTable.from_document(petstore_document)
        route, path_params = table.match("get", "/pets/42")

        assert route.path_template == "/pets/{id}"
        assert path_params == {"id": "42"}
        assert route.response_schema == {"$ref": "#/components/schemas/Pet"}

    def test_method_must_match(self, petstore_document):
        table = MockRouteTable.from_document(petstore_document)
        assert table.match("PUT", "/pets/42") is None

    def test_route_without_json_200(self, petstore_document):
        table = MockRouteTable.from_document(petstore_document)
        route, _ = table.match("POST", "/pets")
        assert route.response_schema is None

    def test_empty_document(self):
        assert len(MockRouteTable.from_document({})) == 0
        assert len(MockRouteTable.from_document({"paths": ["bad"]})) == 0
