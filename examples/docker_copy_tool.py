"""
Example: Docker copy tool.

Shows class-scope helpers used as utility functions from the execute block.
"""

from __future__ import annotations

import os
import re
import sys
from datetime import datetime

import tool_forge
import tool_forge.hosts.llm  # noqa: F401
from tool_forge.core.config import ForgeConfig
from tool_forge.utils.logger import setup_logging


def configure(t):
    t.description("Copies files to Docker containers with tar archive support")

    t.param("container_id", type="string", description="Docker container ID")
    t.param("source_path", type="string", description="Local file path to copy")
    t.param("dest_path", type="string", description="Destination path in container")
    t.param("create_archive", type="boolean", required=False, default=True)

    @t.class_helper("add_to_tar")
    def add_to_tar(file_path, tar_path):
        # A real implementation would write a tar archive here.
        return {
            "operation": "tar_add",
            "source": file_path,
            "target": tar_path,
            "timestamp": datetime.now().isoformat(),
            "success": True,
        }

    @t.class_helper("validate_container_id")
    def validate_container_id(container_id):
        return re.fullmatch(r"[a-f0-9]{12,64}", container_id) is not None

    @t.helper("format_result")
    def format_result(ctx, operation_result, container_id, dest_path):
        if operation_result.get("success"):
            return (
                f"Successfully copied to {container_id}:{dest_path} "
                f"at {operation_result['timestamp']}"
            )
        return f"Failed to copy: {operation_result.get('error')}"

    @t.execute
    def run(ctx, container_id, source_path, dest_path, create_archive=True):
        if not type(ctx).validate_container_id(container_id):
            return {"error": f"Invalid container ID format: {container_id}"}

        if not os.path.exists(source_path):
            return {"error": f"Source file not found: {source_path}"}

        if create_archive:
            tar_result = type(ctx).add_to_tar(source_path, dest_path)
            return ctx.format_result(tar_result, container_id, dest_path)

        return {
            "message": f"Direct copy to {container_id}:{dest_path}",
            "source": source_path,
            "destination": dest_path,
            "method": "direct_copy",
            "timestamp": datetime.now().isoformat(),
        }


docker_copy_tool = tool_forge.define("docker_copy", configure)


if __name__ == "__main__":
    setup_logging(config=ForgeConfig.from_env())

    helpers = docker_copy_tool.helper_methods
    print("Docker Copy Tool Definition Created")
    print(f"Description: {docker_copy_tool.description()}")
    print(f"Parameters: {', '.join(p.name for p in docker_copy_tool.params)}")
    print(f"Helper methods: instance: {list(helpers.instance)}, class: {list(helpers.class_scope)}")

    if len(sys.argv) > 3:
        DockerCopy = docker_copy_tool.to_llm_tool()
        print(DockerCopy().call({
            "container_id": sys.argv[1],
            "source_path": sys.argv[2],
            "dest_path": sys.argv[3],
        }))
