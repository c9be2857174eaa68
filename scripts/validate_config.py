#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from fxcast_app.config.loader import ConfigLoader
from fxcast_app.config.validation import ConfigValidator, ValidationError


def validate_file_config(loader: ConfigLoader) -> List[ValidationError]:
    """Validate the YAML configuration merged over the defaults."""
    config = loader.merge_config()
    return ConfigValidator.validate_config(config)


def main():
    """Main validation function."""
    print("🔍 Validating FXCast configuration...")

    loader = ConfigLoader.create()
    print(f"📁 Config directory: {loader.config_dir}")

    try:
        errors = validate_file_config(loader)
    except Exception as e:
        print(f"❌ Error loading configuration: {e}")
        sys.exit(1)

    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        sys.exit(1)

    config = loader.load()
    print(f"✅ Base currency: {config.currencies.base_currency}")
    print(f"✅ Supported: {', '.join(config.currencies.supported)}")
    print(f"✅ History {config.forecast.history_days}d, horizon {config.forecast.horizon_days}d")
    print(f"\n🎉 Configuration validation passed!")
    sys.exit(0)


if __name__ == "__main__":
    main()
