from fqsum.core.models import HashAlgorithmName

HASH_ALIASES = {
    "md5": HashAlgorithmName.MD5,
    "xxh128": HashAlgorithmName.XXH128,
}

HASH_CHOICES = list(HASH_ALIASES.keys())

HASH_HELP_TEXT = (
    "Digest applied to each canonical record:\n"
    "  md5    : MD5, compatible with checksums from earlier releases (default)\n"
    "  xxh128 : XXH3-128, faster; checksums are NOT comparable with md5 ones\n"
)

EPILOG_TEXT = """
Examples:
  Paired-end reads (files are consumed two at a time as mates)
  %(prog)s sample_R1.fastq.gz sample_R2.fastq.gz

  Several lanes of paired-end reads
  %(prog)s L1_R1.fq.gz L1_R2.fq.gz L2_R1.fq.gz L2_R2.fq.gz

  Single-end files, sequence and quality only
  %(prog)s --no-paired --no-readnames run1.fq run2.fq

  Inspect what is hashed for every read
  %(prog)s --debug sample_R1.fq sample_R2.fq | head

Output: <hex sum><TAB><number of reads>
"""
