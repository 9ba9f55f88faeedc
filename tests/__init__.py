#
# Created by dartqc developers on 14/08/2026.
#
from pathlib import Path

DATA_PATH = (Path(__file__).parent/'test_data')
FLAT_PATH = DATA_PATH/'flat'

SNP_2ROW = FLAT_PATH/'testset_SNPs_2Row.csv'
SNP_1ROW = FLAT_PATH/'testset_SNPs_1Row.csv'
SILICODART = FLAT_PATH/'testset_SilicoDArT.csv'
IND_METAFILE = FLAT_PATH/'testset_metadata.csv'
IND_METAFILE_NOPOP = FLAT_PATH/'testset_metadata_nopop.csv'
