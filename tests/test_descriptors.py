from __future__ import annotations

from taintconf.util.descriptors import class_descriptor, is_type_descriptor


def test_is_type_descriptor():
    assert is_type_descriptor("Ljava/lang/String;")
    assert is_type_descriptor("[[J")
    assert not is_type_descriptor("Ljava/lang/String;extra")
    assert not is_type_descriptor(None)


def test_class_descriptor_from_names():
    assert class_descriptor("java.lang.String") == "Ljava/lang/String;"
    assert class_descriptor("java/util/UUID") == "Ljava/util/UUID;"
    assert class_descriptor(" com.example.Outer$Inner ") == "Lcom/example/Outer$Inner;"


def test_class_descriptor_passes_descriptors_through():
    assert class_descriptor("Ljava/lang/String;") == "Ljava/lang/String;"
    assert class_descriptor("[I") == "[I"
