"""Ordered key aliases for the fields read from system_profiler nodes.

The order of each tuple is significant: the first alias carrying a usable
value wins. Different macOS releases report the same attribute under
different names, so these tables are part of the input compatibility contract.
"""

CHILDREN_KEYS = ("_items", "items")

NAME_KEYS = ("_name", "name")

# Device nodes
DEVICE_IDENTIFYING_KEYS = (
    "vendor_id",
    "idVendor",
    "vendorID",
    "product_id",
    "idProduct",
    "device_speed",
    "spusb_device_speed",
)
DEVICE_VENDOR_KEYS = ("vendor", "manufacturer", "Vendor Name", "vendor_id")
DEVICE_VENDOR_ID_KEYS = ("vendor_id", "idVendor", "vendor-id")
DEVICE_PRODUCT_ID_KEYS = ("product_id", "idProduct", "product-id")
DEVICE_PRODUCT_NAME_KEYS = ("product_name",)
DEVICE_SERIAL_KEYS = ("serial_num", "serial_number", "Serial Number")
DEVICE_LOCATION_KEYS = ("location_id", "Location ID")
DEVICE_BSD_NAME_KEYS = ("bsd_name", "BSD Name")
DEVICE_USB_VERSION_KEYS = ("usb_version", "bcdUSB", "bcd_device")
DEVICE_SPEED_KEYS = ("device_speed", "spusb_device_speed", "speed")
DEVICE_CURRENT_REQUIRED_KEYS = ("current_required", "spusb_current_required")
DEVICE_CURRENT_AVAILABLE_KEYS = (
    "current_available",
    "spusb_current_available",
    "spusb_bus_power_available",
)
DEVICE_EXTRA_CURRENT_KEYS = ("extra_current", "spusb_current_extra")
DEVICE_INTERFACE_COUNT_KEYS = (
    "num_interfaces",
    "spusb_num_interfaces",
    "number_of_interfaces",
)
INTERFACE_NUMBER_KEYS = ("interface_number", "bInterfaceNumber")
DEVICE_CLASS_KEYS = ("usb_device_class", "Device Class", "class")
DEVICE_SUBCLASS_KEYS = ("usb_device_subclass", "Device Subclass", "subclass")
DEVICE_PROTOCOL_KEYS = ("usb_device_protocol", "Device Protocol", "protocol")
DEVICE_CABLE_TYPE_KEYS = ("cable_type",)

# Cable nodes
CABLE_TYPE_MARKER_KEY = "cable_type"
CABLE_DEVICE_TYPE_KEYS = ("device_type",)
CABLE_NAME_KEYS = ("_name", "name", "device_name")
CABLE_VENDOR_KEYS = ("vendor", "vendor_name", "Manufacturer")
CABLE_PRODUCT_ID_KEYS = ("product_id", "idProduct")
CABLE_SERIAL_KEYS = ("serial_number", "Serial Number")
CABLE_TYPE_KEYS = ("cable_type", "device_type")
CABLE_MAX_SPEED_KEYS = (
    "cable_speed",
    "device_speed",
    "current_link_speed",
    "link_speed",
)
CABLE_PROTOCOL_KEYS = (
    "supported_protocols",
    "protocols",
    "transport_support",
    "supported_modes",
)

# Top-level collections of a system_profiler -json payload
USB_DATA_TYPE = "SPUSBDataType"
THUNDERBOLT_DATA_TYPE = "SPThunderboltDataType"
