"""Infrastructure adapters for the stream_xml package."""
