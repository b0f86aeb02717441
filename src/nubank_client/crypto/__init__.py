from .keys import KeyPairGenerator, new_device_id

__all__ = ["KeyPairGenerator", "new_device_id"]
