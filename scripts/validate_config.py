#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List, Optional

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import yaml

from simplestocks.config.loader import ConfigLoader
from simplestocks.config.validation import ConfigValidator, ValidationError
from simplestocks.errors import CatalogError


def validate_exchange_config(config_dir: Optional[Path] = None) -> List[ValidationError]:
    """Validate merged exchange configuration for a config directory."""
    loader = ConfigLoader.create(config_dir)
    config = loader.merge_config()
    return ConfigValidator.validate_config(config)


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_dir)

    print(f"🔍 Validating exchange configuration in {loader.config_dir}...")

    try:
        errors = validate_exchange_config(loader.config_dir)
    except yaml.YAMLError as e:
        print(f"❌ Could not parse exchange.yaml: {e}")
        sys.exit(1)
    except CatalogError as e:
        errors = e.errors

    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        print(f"\n❌ Configuration validation failed!")
        sys.exit(1)

    catalog = loader.load_catalog()
    print(f"\n📊 {len(catalog)} instruments listed:")
    for instrument in catalog:
        rate = f", fixed rate {instrument.fixed_rate:g}%" if instrument.has_fixed_rate else ""
        print(f"  • {instrument.symbol} ({instrument.category.value}, par {instrument.par_value}, "
              f"last dividend {instrument.last_dividend}{rate})")

    print(f"\n🎉 All configuration validation passed!")
    sys.exit(0)


if __name__ == "__main__":
    main()
