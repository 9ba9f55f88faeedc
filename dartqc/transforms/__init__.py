from .recode import (make_recode_pop_table, make_recode_ind_table, recode_pop, recode_ind,
                     recode_pop_from_mapping)

__all__ = [
    'make_recode_pop_table', 'make_recode_ind_table', 'recode_pop', 'recode_ind',
    'recode_pop_from_mapping'
]
