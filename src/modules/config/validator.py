from typing import List
from pydantic import ValidationError
from pydantic_core import ErrorDetails
import yaml
from .config import AppConfig

def _build_validation_error_message(errors: List[ErrorDetails]) -> str:
    """Build a readable message from a list of Pydantic validation errors."""
    messages = []
    for error in errors:
        field_path = " -> ".join(str(loc) for loc in error['loc'])
        msg = error['msg']
        messages.append(f"Error in field '{field_path}': {msg}")

    return "\n".join(messages)

class ConfigYamlValidator:
    """Validates YAML content and creates AppConfig instances."""

    @classmethod
    def validate_and_load(cls, yaml_content: str) -> AppConfig:
        """
        Validate YAML content and create an AppConfig instance.
        
        An empty document yields the default configuration.
        
        Args:
            yaml_content: The YAML content to validate
            
        Returns:
            AppConfig: The validated application configuration
            
        Raises:
            ValueError: If the YAML content is invalid
        """
        try:
            data = yaml.safe_load(yaml_content)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML format: {str(e)}")

        if data is None:
            return AppConfig()
        if not isinstance(data, dict):
            raise ValueError("Invalid config format: top level must be a mapping")

        try:
            return AppConfig.model_validate(data)
        except ValidationError as e:
            raise ValueError(_build_validation_error_message(e.errors()))
