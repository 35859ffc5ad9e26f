from thumbnail_demo.ports.outbound.external_thumbnailer_port import ExternalThumbnailerPort
from thumbnail_demo.ports.outbound.media_probe_port import MediaProbePort
from thumbnail_demo.ports.outbound.thumbnail_provider_port import ThumbnailProviderPort

__all__ = [
    "ThumbnailProviderPort",
    "ExternalThumbnailerPort",
    "MediaProbePort",
]
