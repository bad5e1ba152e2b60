"""
Example: File processor tool.

Shows instance helpers working together and structured output, served
through the MCP host.
"""

from __future__ import annotations

import json
import os
import sys

import tool_forge
import tool_forge.hosts.mcp  # noqa: F401
from tool_forge.core.config import ForgeConfig
from tool_forge.utils.logger import setup_logging


def _transform(content: str, operation: str) -> str:
    op = operation.lower()
    if op == "uppercase":
        return content.upper()
    if op == "lowercase":
        return content.lower()
    if op == "title_case":
        return " ".join(w.capitalize() for w in content.split())
    if op == "reverse_lines":
        return "".join(reversed(content.splitlines(keepends=True)))
    if op == "reverse_words":
        return " ".join(reversed(content.split()))
    if op == "remove_blank_lines":
        return "".join(line for line in content.splitlines(keepends=True) if line.strip())
    if op == "number_lines":
        return "".join(f"{i}. {line}" for i, line in enumerate(content.splitlines(keepends=True), 1))
    return content


def configure(t):
    t.description("Processes text files with various transformations and analysis")

    t.param("file_path", type="string", description="Path to the file to process")
    t.param("operations", type="array", description="List of operations to perform")
    t.param("output_format", type="string", required=False, default="json")
    t.param("preserve_original", type="boolean", required=False, default=True)

    @t.helper("read_file_content")
    def read_file_content(ctx, path):
        if not os.path.exists(path):
            return {"error": f"File not found: {path}"}
        with open(path, encoding="utf-8") as f:
            content = f.read()
        return {
            "content": content,
            "size": os.path.getsize(path),
            "lines": len(content.splitlines()),
            "encoding": "utf-8",
        }

    @t.helper("analyze_text")
    def analyze_text(ctx, content):
        lines = content.splitlines()
        words = content.split()
        return {
            "character_count": len(content),
            "word_count": len(words),
            "line_count": len(lines),
            "average_line_length": round(len(content) / len(lines), 2) if lines else 0,
            "longest_word": max(words, key=len) if words else "",
            "unique_words": len({w.lower() for w in words}),
        }

    t.helper("transform_text", lambda ctx, content, operation: _transform(content, operation))

    @t.helper("format_output")
    def format_output(ctx, data, fmt):
        fmt = fmt.lower()
        if fmt == "json":
            return json.dumps(data, indent=2, ensure_ascii=False)
        if fmt == "text":
            if isinstance(data, dict):
                return "\n".join(f"{k}: {v}" for k, v in data.items())
            return str(data)
        return repr(data)

    @t.execute
    def run(ctx, file_path, operations, output_format="json", preserve_original=True):
        file_data = ctx.read_file_content(file_path)
        if "error" in file_data:
            return file_data

        content = file_data["content"]
        processed = content
        results = []

        for operation in operations:
            if operation.lower() == "analyze":
                results.append({"operation": operation, "result": ctx.analyze_text(processed)})
                continue
            before = processed
            processed = ctx.transform_text(processed, operation)
            results.append({
                "operation": operation,
                "applied": before != processed,
                "preview": processed[:100] + ("..." if len(processed) > 100 else ""),
            })

        result = {
            "file_info": {k: v for k, v in file_data.items() if k != "content"},
            "operations_applied": results,
            "final_content": processed,
            "processing_summary": {
                "operations_count": len(operations),
                "content_changed": (content != processed) if preserve_original else None,
                "final_size": len(processed),
            },
        }
        if preserve_original:
            result["original_content"] = content

        return ctx.format_output(result, output_format)


file_processor_tool = tool_forge.define("file_processor", configure)


if __name__ == "__main__":
    config = ForgeConfig.from_env()
    setup_logging(config=config)

    print(f"Description: {file_processor_tool.description()}")
    print(f"Parameters: {', '.join(f'{p.name} ({p.type})' for p in file_processor_tool.params)}")

    if len(sys.argv) > 1:
        FileProcessor = file_processor_tool.to_mcp_tool(config=config)
        response = FileProcessor.call(
            server_context=None,
            file_path=sys.argv[1],
            operations=sys.argv[2:] or ["analyze"],
        )
        print(response.content[0]["text"])
