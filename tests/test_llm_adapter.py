"""
Tests for the LLM host adapter (ToolDefinition.to_llm_tool).
"""

import logging
import os

import pytest

from tool_forge import LoadConfigurationError, define
from tool_forge.hosts import LLM_HOST
from tool_forge.hosts.llm import LLMTool


def _greeting(t):
    t.description("Greets a user")
    t.param("name", type="string")
    t.execute(lambda ctx, name: f"Hello, {name}!")


# ══════════════════════════════════════════════
# Host precondition
# ══════════════════════════════════════════════


class TestHostPrecondition:
    def test_raises_when_host_not_loaded(self, without_host):
        tool = define("my_tool", lambda t: t.description("A test tool"))
        without_host(LLM_HOST)

        with pytest.raises(LoadConfigurationError, match="LLM tool host is not loaded") as exc:
            tool.to_llm_tool()
        assert exc.value.host == LLM_HOST
        assert "tool_forge.hosts.llm" in str(exc.value)

    def test_is_an_import_error(self, without_host):
        without_host(LLM_HOST)
        with pytest.raises(ImportError):
            define("my_tool").to_llm_tool()

    def test_injected_base_bypasses_registry(self, without_host):
        without_host(LLM_HOST)

        class CustomBase(LLMTool):
            pass

        tool_cls = define("greeting_tool", _greeting).to_llm_tool(base=CustomBase)
        assert issubclass(tool_cls, CustomBase)
        assert tool_cls().execute(name="Ann") == "Hello, Ann!"


# ══════════════════════════════════════════════
# Class shape
# ══════════════════════════════════════════════


class TestMaterializedClass:
    """Declarations made on the generated class."""

    def test_subclass_of_llm_tool(self):
        tool_cls = define("my_tool", lambda t: t.description("A test tool")).to_llm_tool()
        assert isinstance(tool_cls, type)
        assert issubclass(tool_cls, LLMTool)
        assert tool_cls.__name__ == "MyTool"

    def test_description(self):
        tool_cls = define("greeting_tool", _greeting).to_llm_tool()
        assert tool_cls().description() == "Greets a user"
        assert tool_cls.tool_name() == "greeting_tool"

    def test_description_is_snapshot(self):
        tool = define("greeting_tool", _greeting)
        tool_cls = tool.to_llm_tool()
        tool.description("Changed later")

        assert tool_cls.description() == "Greets a user"

    def test_params_in_order_without_required(self):
        def configure(t):
            t.param("p1", type="string", description="first")
            t.param("p2", type="integer", required=False, default=5)
            t.param("p3", type="boolean")

        tool_cls = define("ordered", configure).to_llm_tool()
        params = tool_cls.parameters()

        assert list(params) == ["p1", "p2", "p3"]
        assert params["p1"].description == "first"
        assert params["p2"].type == "integer"
        # required/default are not forwarded to this host
        assert params["p2"].required is True

    def test_openai_schema_export(self):
        tool_cls = define("greeting_tool", _greeting).to_llm_tool()
        schema = tool_cls.to_openai_schema()

        assert schema["type"] == "function"
        assert schema["function"]["name"] == "greeting_tool"
        assert schema["function"]["parameters"]["properties"] == {"name": {"type": "string"}}
        assert schema["function"]["parameters"]["required"] == ["name"]

    def test_definition_not_mutated(self):
        tool = define("greeting_tool", _greeting)
        tool.to_llm_tool()
        tool.to_llm_tool()

        assert [p.name for p in tool.params] == ["name"]
        assert tool.description() == "Greets a user"

    def test_independent_classes(self):
        tool = define("greeting_tool", _greeting)
        a = tool.to_llm_tool()
        b = tool.to_llm_tool()

        assert a is not b
        assert a.definition is b.definition is tool


# ══════════════════════════════════════════════
# execute
# ══════════════════════════════════════════════


class TestExecute:
    def test_calls_block(self):
        instance = define("greeting_tool", _greeting).to_llm_tool()()
        assert instance.execute(name="Alice") == "Hello, Alice!"

    def test_call_dispatches_mapping(self):
        instance = define("greeting_tool", _greeting).to_llm_tool()()
        assert instance.call({"name": "Alice"}) == "Hello, Alice!"

    def test_defaults_come_from_block_signature(self):
        def configure(t):
            t.param("name", type="string")
            t.param("greeting", type="string", default="Hello")
            t.execute(lambda ctx, name, greeting="Hello": f"{greeting}, {name}!")

        instance = define("greeting_tool", configure).to_llm_tool()()
        assert instance.execute(name="Bob") == "Hello, Bob!"
        assert instance.execute(name="Bob", greeting="Hi") == "Hi, Bob!"

    def test_declared_default_is_not_substituted(self):
        def configure(t):
            t.param("greeting", type="string", required=False, default="Hello")
            t.execute(lambda ctx, **kwargs: kwargs)

        instance = define("echo", configure).to_llm_tool()()
        assert instance.execute() == {}

    def test_raw_return_value(self):
        def configure(t):
            for name, type_ in [("name", "string"), ("count", "integer"), ("active", "boolean"),
                                ("tags", "array"), ("metadata", "object")]:
                t.param(name, type=type_)
            t.execute(lambda ctx, **kwargs: dict(kwargs))

        instance = define("complex_tool", configure).to_llm_tool()()
        args = {
            "name": "test",
            "count": 5,
            "active": True,
            "tags": ["a", "b"],
            "metadata": {"key": "value"},
        }
        assert instance.execute(**args) == args

    def test_errors_propagate(self):
        def boom(ctx):
            raise ValueError("boom")

        instance = define("failing", lambda t: t.execute(boom)).to_llm_tool()()
        with pytest.raises(ValueError, match="boom"):
            instance.execute()

    def test_missing_execute_block(self):
        instance = define("empty").to_llm_tool()()
        with pytest.raises(RuntimeError, match="has no execute block"):
            instance.execute()

    def test_param_named_self(self):
        def configure(t):
            t.param("self", type="string")
            t.helper("echo", lambda ctx, **kw: kw)
            t.execute(lambda ctx, **kw: ctx.echo(self=kw["self"]))

        instance = define("selfish", configure).to_llm_tool()()
        assert instance.execute(self="me") == {"self": "me"}
        assert instance.call({"self": "me"}) == {"self": "me"}

    def test_same_instance_executes_repeatedly(self):
        def configure(t):
            t.param("text", type="string")
            t.helper("tag", lambda ctx, s: f"{id(ctx)}:{s}")
            t.execute(lambda ctx, text: ctx.tag(text))

        instance = define("tagger", configure).to_llm_tool()()
        first = instance.execute(text="a")
        second = instance.execute(text="b")

        assert first == f"{id(instance)}:a"
        assert second == f"{id(instance)}:b"


# ══════════════════════════════════════════════
# Helpers
# ══════════════════════════════════════════════


class TestHelpers:
    """Helper reachability from the generated class."""

    def test_instance_helpers_are_methods(self):
        def configure(t):
            t.param("text", type="string")
            t.helper("add_prefix", lambda ctx, s: f"PREFIX: {s}")
            t.helper("add_suffix", lambda ctx, s: f"{s} :SUFFIX")

            @t.execute
            def run(ctx, text):
                return ctx.add_suffix(ctx.add_prefix(text))

        instance = define("helper_tool", configure).to_llm_tool()()

        assert hasattr(instance, "add_prefix")
        assert hasattr(instance, "add_suffix")
        assert instance.add_prefix("Hello") == "PREFIX: Hello"
        assert instance.add_suffix("World") == "World :SUFFIX"
        assert instance.execute(text="Hello") == "PREFIX: Hello :SUFFIX"

    def test_helpers_call_other_helpers(self):
        def configure(t):
            t.param("data", type="string")
            t.helper("format_data", lambda ctx, s: f"FORMATTED: {s}")
            t.helper("process_data", lambda ctx, s: ctx.format_data(f"PROCESSED: {s}"))
            t.execute(lambda ctx, data: ctx.process_data(data))

        instance = define("complex_helper_tool", configure).to_llm_tool()()
        assert instance.execute(data="test") == "FORMATTED: PROCESSED: test"

    def test_class_helpers_are_static(self):
        def configure(t):
            t.param("file_path", type="string")
            t.param("container_id", type="string")
            t.class_helper(
                "add_to_tar",
                lambda file_path, tar_path: f"Added {file_path} to tar as {tar_path}",
            )

            @t.execute
            def run(ctx, file_path, container_id):
                tar_result = type(ctx).add_to_tar(file_path, f"/app/{os.path.basename(file_path)}")
                return f"Copied to container {container_id}: {tar_result}"

        tool_cls = define("docker_tool", configure).to_llm_tool()

        assert tool_cls.add_to_tar("a", "b") == "Added a to tar as b"
        result = tool_cls().execute(file_path="/local/file.txt", container_id="abc123")
        assert result == "Copied to container abc123: Added /local/file.txt to tar as /app/file.txt"

    def test_both_helper_kinds(self):
        def configure(t):
            t.param("data", type="string")
            t.helper("format_data", lambda ctx, data: f"FORMATTED: {data}")
            t.class_helper("process_static", lambda data: f"STATIC: {data}")

            @t.execute
            def run(ctx, data):
                return f"{ctx.format_data(data)} + {type(ctx).process_static(data)}"

        instance = define("complex_tool", configure).to_llm_tool()()
        assert instance.execute(data="test") == "FORMATTED: test + STATIC: test"

    def test_no_helpers(self):
        instance = define("simple_tool", _greeting).to_llm_tool()()
        assert instance.execute(name="World") == "Hello, World!"

    def test_helper_named_like_host_api_is_skipped(self, caplog):
        def configure(t):
            t.description("D")
            t.param("x", type="string")
            t.helper("description", lambda ctx: "helper")
            t.class_helper("param", lambda: "helper")
            t.helper("execute", lambda ctx, **kw: "helper")
            t.execute(lambda ctx, x: x)

        with caplog.at_level(logging.WARNING, logger="tool_forge.adapters"):
            tool_cls = define("clashing", configure).to_llm_tool()

        assert tool_cls.description() == "D"
        assert list(tool_cls.parameters()) == ["x"]
        assert tool_cls().execute(x="ok") == "ok"
        for name in ("description", "param", "execute"):
            assert f"helper {name!r} collides" in caplog.text

    def test_clashing_helper_still_installed_for_mcp(self):
        def configure(t):
            t.helper("description", lambda ctx: "helper")
            t.execute(lambda ctx: ctx.description())

        tool_cls = define("mcp_ok", configure).to_mcp_tool()
        assert tool_cls.call().content[0]["text"] == "helper"
