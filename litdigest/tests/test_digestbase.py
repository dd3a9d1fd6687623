
import unittest

import os
import zlib
import random
import hashlib

from litdigest.errors import InvalidArgument, AllocationFailure
from litdigest.digestbase import sha1, sha256, crc32, padding


FOX = b"The quick brown fox jumps over the lazy dog"
NIST2 = b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq"


def _bitdiff(x,y):
    return bin(int.from_bytes(x,"big") ^ int.from_bytes(y,"big")).count("1")


class TestDigestBase(unittest.TestCase):

    sha1 = sha1
    sha256 = sha256
    crc32 = crc32

    def test_sha1_vectors(self):
        sha1 = self.sha1.sha1
        self.assertEqual(sha1(b"abc").hex(),
                         "a9993e364706816aba3e25717850c26c9cd0d89d")
        self.assertEqual(sha1(b"").hex(),
                         "da39a3ee5e6b4b0d3255bfef95601890afd80709")
        self.assertEqual(sha1(NIST2).hex(),
                         "84983e441c3bd26ebaae4aa1f95129e5e54670f1")
        self.assertEqual(sha1(FOX).hex(),
                         "2fd4e1c67a2d28fced849ee1bb76e7391b93eb12")

    def test_sha256_vectors(self):
        sha256 = self.sha256.sha256
        self.assertEqual(sha256(b"abc").hex(),
            "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad")
        self.assertEqual(sha256(b"").hex(),
            "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855")
        self.assertEqual(sha256(NIST2).hex(),
            "248d6a61d20638b8e5c026930c3e6039a33ce45964ff2167f6ecedd419db06c1")
        self.assertEqual(sha256(FOX).hex(),
            "d7a8fbb307d7809469ca9abcb0082e4f8d5651e46d3cdb762d02d0bf37c9e592")

    def test_crc32_vectors(self):
        crc32 = self.crc32.crc32
        self.assertEqual(crc32(b"123456789"),0xCBF43926)
        self.assertEqual(crc32(b""),0)
        self.assertEqual(crc32(FOX),0x414FA339)
        self.assertEqual(crc32(b"\xde\xad\xbe\xef"),
                         zlib.crc32(b"\xde\xad\xbe\xef"))
        self.assertEqual(crc32(b"apple123"),zlib.crc32(b"apple123"))

    def test_crc32_bitwise_agrees(self):
        for i in range(50):
            bs = os.urandom(random.randint(0,200))
            self.assertEqual(self.crc32.crc32(bs),self.crc32.crc32_bitwise(bs))

    def test_hashes(self):
        HASHES = ((self.sha1.sha1,hashlib.sha1),
                  (self.sha256.sha256,hashlib.sha256))
        for (py,c) in HASHES:
            self.assertEqual(py(b"foo"),c(b"foo").digest())
            self.assertEqual(py(b"\x00"),c(b"\x00").digest())
            self.assertEqual(py(b"\xde\xad\xbe\xef"),
                             c(b"\xde\xad\xbe\xef").digest())
            self.assertEqual(py(b"apple123"),c(b"apple123").digest())
            for i in range(30):
                ln = random.randint(1,300)
                bs = os.urandom(ln)
                self.assertEqual(py(bs),c(bs).digest())

    def test_padding_boundaries(self):
        for ln in (55,56,57,63,64,65,119,120,127,128,129):
            bs = os.urandom(ln)
            self.assertEqual(self.sha1.sha1(bs),hashlib.sha1(bs).digest())
            self.assertEqual(self.sha256.sha256(bs),
                             hashlib.sha256(bs).digest())
            self.assertEqual(self.crc32.crc32(bs),zlib.crc32(bs))

    def test_digest_sizes(self):
        for ln in (0,1,20,55,64,100,1000):
            bs = b"x" * ln
            self.assertEqual(len(self.sha1.sha1(bs)),20)
            self.assertEqual(len(self.sha256.sha256(bs)),32)
            self.assertTrue(0 <= self.crc32.crc32(bs) <= 0xFFFFFFFF)
        self.assertEqual(self.sha1.DIGEST_SIZE,20)
        self.assertEqual(self.sha256.DIGEST_SIZE,32)

    def test_deterministic(self):
        bs = os.urandom(150)
        self.assertEqual(self.sha1.sha1(bs),self.sha1.sha1(bytes(bs)))
        self.assertEqual(self.sha256.sha256(bs),self.sha256.sha256(bs))
        self.assertEqual(self.crc32.crc32(bs),self.crc32.crc32(bs))

    def test_bytes_like_input(self):
        for func in (self.sha1.sha1,self.sha256.sha256,self.crc32.crc32):
            self.assertEqual(func(bytearray(FOX)),func(FOX))
            self.assertEqual(func(memoryview(FOX)),func(FOX))

    def test_rejects_non_bytes(self):
        for func in (self.sha1.sha1,self.sha256.sha256,self.crc32.crc32):
            self.assertRaises(InvalidArgument,func,"abc")
            self.assertRaises(InvalidArgument,func,None)
            self.assertRaises(InvalidArgument,func,12345)
            self.assertRaises(ValueError,func,"abc")

    def test_single_bit_sensitivity(self):
        flipped = bytes([FOX[0] ^ 0x01]) + FOX[1:]
        d = _bitdiff(self.sha1.sha1(FOX),self.sha1.sha1(flipped))
        self.assertTrue(40 < d < 120, d)
        d = _bitdiff(self.sha256.sha256(FOX),self.sha256.sha256(flipped))
        self.assertTrue(64 < d < 192, d)
        self.assertNotEqual(self.crc32.crc32(FOX),self.crc32.crc32(flipped))


class TestPadding(unittest.TestCase):

    def test_padded_length(self):
        self.assertEqual(padding.padded_length(0),64)
        self.assertEqual(padding.padded_length(55),64)
        self.assertEqual(padding.padded_length(56),128)
        self.assertEqual(padding.padded_length(64),128)
        self.assertEqual(padding.padded_length(119),128)
        self.assertEqual(padding.padded_length(120),192)

    def test_pad_message_layout(self):
        for ln in (0,3,55,56,63,64,65,200):
            bs = os.urandom(ln)
            buf = padding.pad_message(bs)
            self.assertEqual(len(buf) % 64,0)
            self.assertEqual(len(buf),padding.padded_length(ln))
            self.assertEqual(bytes(buf[:ln]),bs)
            self.assertEqual(buf[ln],0x80)
            self.assertEqual(bytes(buf[ln+1:-8]),b"\x00" * (len(buf)-ln-9))
            self.assertEqual(int.from_bytes(buf[-8:],"big"),ln * 8)

    def test_iter_blocks(self):
        buf = padding.pad_message(b"abc")
        blocks = list(padding.iter_blocks(buf))
        self.assertEqual(len(blocks),1)
        self.assertEqual(len(blocks[0]),16)
        self.assertEqual(blocks[0][0],0x61626380)
        self.assertEqual(blocks[0][15],24)
        self.assertEqual(len(list(padding.iter_blocks(bytearray(192)))),3)
        self.assertRaises(InvalidArgument,list,
                          padding.iter_blocks(bytearray(65)))

    def test_allocation_failure(self):
        from unittest import mock
        with mock.patch("litdigest.digestbase.padding.bytearray",
                        side_effect=MemoryError,create=True):
            self.assertRaises(AllocationFailure,padding.pad_message,b"abc")
            self.assertRaises(MemoryError,sha1.sha1,b"abc")

    def test_math(self):
        m = padding.math
        self.assertEqual(m.rotl32(0x80000000,1),1)
        self.assertEqual(m.rotr32(1,1),0x80000000)
        self.assertEqual(m.rotl32(0x12345678,8),0x34567812)
        self.assertEqual(m.rotr32(0x12345678,8),0x78123456)
        self.assertEqual(m.shr32(0x80000000,31),1)
        self.assertEqual(m.add32(0xFFFFFFFF,1),0)
        self.assertEqual(m.add32(0xFFFFFFFF,0xFFFFFFFF,2),0)


class TestCRCTable(unittest.TestCase):

    def test_table(self):
        self.assertEqual(len(crc32.CRC_TABLE),256)
        self.assertEqual(crc32.CRC_TABLE[0],0)
        self.assertEqual(crc32.CRC_TABLE[1],0x77073096)
        self.assertEqual(crc32.CRC_TABLE[255],0x2D02EF8D)

    def test_bitwise_vectors(self):
        self.assertEqual(crc32.crc32_bitwise(b"123456789"),0xCBF43926)
        self.assertEqual(crc32.crc32_bitwise(b""),0)
        self.assertEqual(crc32.crc32_bitwise(FOX),zlib.crc32(FOX))
