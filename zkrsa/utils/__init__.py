from zkrsa.utils.misc import (
    ensure_bn,
    ensure_bytes,
    get_random_num,
    byte_length,
    round_up_to_byte,
)
from zkrsa.utils.octets import (
    i2osp,
    os2ip,
    octet_length,
    combine,
    sha256,
    mgf1_sha256,
    truncate_to_k_bits,
)
from zkrsa.utils.groups import sample_from_zn_star, make_bases
