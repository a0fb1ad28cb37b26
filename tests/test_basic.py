"""
Basic tests - project setup
"""
import pytest


class TestProjectSetup:
    """Project setup checks"""

    def test_python_version(self):
        """Python 3.10 or newer"""
        import sys
        assert sys.version_info >= (3, 10), "Python 3.10+ required"

    def test_loguru_import(self):
        import loguru
        assert loguru is not None

    def test_yaml_import(self):
        import yaml
        assert yaml is not None

    def test_dotenv_import(self):
        import dotenv
        assert dotenv is not None

    def test_package_import(self):
        """Package layout"""
        import hdr_pipeline
        import hdr_pipeline.core
        import hdr_pipeline.stages
        import hdr_pipeline.orchestrator
        import hdr_pipeline.cli
        assert hdr_pipeline.__version__ == "0.1.0"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
