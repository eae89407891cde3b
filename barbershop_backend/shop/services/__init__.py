from .pricing_config import DjangoPricingConfigSource, load_pricing_config

__all__ = [
    "DjangoPricingConfigSource",
    "load_pricing_config",
]
