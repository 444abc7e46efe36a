"""Hook implementations announcing the processors shipped with this package."""

from ..hookspecs import hookimpl
from .base import ProcessorInfo
from .bundle_filter import BundleFilter
from .html_filter import HtmlFilter

BUILTIN_PROCESSORS = (BundleFilter, HtmlFilter)


@hookimpl
def search_api_processor_info():
    return {
        cls.ID: ProcessorInfo(
            id=cls.ID,
            name=cls.NAME,
            processor_class=cls,
            description=cls.DESCRIPTION,
            weight=cls.WEIGHT,
        )
        for cls in BUILTIN_PROCESSORS
    }
