__version__ = "0.1.0"


from . import style as style
from ._errors import ConfigurationError as ConfigurationError
from ._errors import SinkError as SinkError
from ._errors import TabalignError as TabalignError
from ._settings import Flags as Flags
from ._settings import WriterConfig as WriterConfig
from ._warnings import TabalignWarning as TabalignWarning
from ._writer import AlignedWriter as AlignedWriter
from ._writer import Sink as Sink
from ._writer import align as align
