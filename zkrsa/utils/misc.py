from petlib.bn import Bn


def ensure_bn(x):
    """
    Ensure that value is big number.

    >>> isinstance(ensure_bn(42), Bn)
    True
    >>> isinstance(ensure_bn(Bn(42)), Bn)
    True
    >>> ensure_bn(2 ** 100) == Bn(2).pow(100)
    True
    >>> ensure_bn(-(2 ** 70)) == -Bn(2).pow(70)
    True
    """
    if isinstance(x, Bn):
        return x
    elif isinstance(x, int) and not isinstance(x, bool):
        # Bn(x) only takes machine-size integers
        return Bn.from_hex("{:x}".format(x))
    else:
        return Bn(x)


def get_random_num(bits):
    """
    Draw a random number of given bitlength.

    The number is uniform in :math:`[0, 2^{bits})`, drawn from the OpenSSL CSPRNG.

    >>> x = get_random_num(6)
    >>> x < 2**6
    True
    """
    order = Bn(2).pow(bits)
    return order.random()


def byte_length(bits):
    """
    Number of bytes needed to hold a given number of bits.

    >>> byte_length(1)
    1
    >>> byte_length(128)
    16
    >>> byte_length(129)
    17
    """
    return (bits + 7) // 8


def round_up_to_byte(bits):
    """
    Round a bit count up to the closest multiple of 8.

    >>> round_up_to_byte(80)
    80
    >>> round_up_to_byte(81)
    88
    """
    return byte_length(bits) * 8


def ensure_bytes(data):
    """
    Encode text as UTF-8, pass bytes through.

    >>> ensure_bytes("public string")
    b'public string'
    >>> ensure_bytes(b"abc")
    b'abc'
    """
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray)):
        return bytes(data)
    raise TypeError("Expected bytes or str, got {}".format(type(data).__name__))
