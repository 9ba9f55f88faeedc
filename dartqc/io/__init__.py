from .dart import read_dart, dart_to_container, read_silicodart, gl_read_dart
from .flat import load_ind_metafile, load_recode_table, write_recode_table
from .serialization import load_container, save_container

__all__ = [
    'read_dart', 'dart_to_container', 'read_silicodart', 'gl_read_dart',
    'load_ind_metafile', 'load_recode_table', 'write_recode_table',
    'load_container', 'save_container'
]
