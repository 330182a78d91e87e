KMERSIZE = 5

# one dense int64 vector is held per sequence; 4^12 slots is 128 MiB
MAX_VECTOR_SIZE = 4**12
MAX_KMERSIZE = 12

DNA_ALPHABET = "ACGT"
DNA5_ALPHABET = "ACGTN"
