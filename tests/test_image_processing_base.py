# -*- coding: utf-8 -*-
"""
Processor Framework Tests - Tunable parameters, versioning, base classes,
and pipelines.

Dependencies
------------
pytest

Author
------
texel developers

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

import warnings
from typing import Annotated

import numpy as np
import pytest

from texel import PixelBuffer, ProcessorCategory, ValidationError
from texel.image_processing import (
    ChannelwiseTransformMixin,
    Desc,
    ImageAnalyzer,
    ImageProcessor,
    ImageTransform,
    Options,
    ParamSpec,
    Pipeline,
    Range,
    processor_tags,
    processor_version,
)
from texel.image_processing.filters import Dilation, Erosion, MeanFilter
from texel.image_processing.params import ParamMeta, collect_param_specs


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

@processor_version('1.0.0')
class _AddConstant(ChannelwiseTransformMixin, ImageTransform):
    """Adds ``offset`` to every sample, saturating at 255."""

    offset: Annotated[int, Range(min=0, max=255), Desc('Added value')] = 1

    def __init__(self, offset=1):
        self.offset = offset

    def _apply_2d(self, source, **kwargs):
        offset = self._resolve_params(kwargs)['offset']
        return np.clip(source.astype(np.int64) + offset, 0, 255).astype(np.uint8)


@processor_version('1.0.0')
class _Invert(ImageTransform):

    def apply(self, source, **kwargs):
        return (255 - np.asarray(source)).astype(np.uint8)


# ---------------------------------------------------------------------------
# Parameter markers
# ---------------------------------------------------------------------------

class TestMarkers:
    """Test Range, Options, Desc markers."""

    def test_range(self):
        r = Range(min=0, max=10)
        assert r.min == 0
        assert r.max == 10
        assert isinstance(r, ParamMeta)
        assert 'min=0' in repr(r)

    def test_range_defaults_none(self):
        r = Range()
        assert r.min is None
        assert r.max is None

    def test_options(self):
        assert Options('a', 'b').choices == ('a', 'b')

    def test_empty_options_raises(self):
        with pytest.raises(ValueError, match="at least one"):
            Options()

    def test_desc(self):
        assert Desc('text').text == 'text'


class TestParamSpec:
    """Test ParamSpec.validate."""

    def _spec(self, param_type, **kw):
        fields = dict(name='p', param_type=param_type, default=None,
                      description='', min_value=None, max_value=None,
                      choices=None)
        fields.update(kw)
        return ParamSpec(**fields)

    def test_int_accepted_for_float(self):
        self._spec(float).validate(3)

    def test_bool_rejected_for_int(self):
        with pytest.raises(TypeError, match="bool"):
            self._spec(int).validate(True)

    def test_wrong_type(self):
        with pytest.raises(TypeError, match="must be str"):
            self._spec(str).validate(3)

    def test_below_minimum(self):
        with pytest.raises(ValueError, match="below minimum"):
            self._spec(int, min_value=1).validate(0)

    def test_above_maximum(self):
        with pytest.raises(ValueError, match="above maximum"):
            self._spec(float, max_value=1.0).validate(1.5)

    def test_choices(self):
        spec = self._spec(str, choices=('a', 'b'))
        spec.validate('a')
        with pytest.raises(ValueError, match="allowed choices"):
            spec.validate('c')


class TestCollectParamSpecs:
    """Test Annotated parameter collection."""

    def test_specs_collected_on_subclass(self):
        names = [s.name for s in MeanFilter.__param_specs__]
        assert names == ['radius', 'method', 'order']

    def test_spec_details(self):
        radius = MeanFilter.__param_specs__[0]
        assert radius.param_type is int
        assert radius.default == 1
        assert radius.min_value == 0
        method = MeanFilter.__param_specs__[1]
        assert 'geometric' in method.choices

    def test_plain_annotations_ignored(self):
        class _Plain:
            x: int = 1
            y: Annotated[int, 'not a marker'] = 2
        assert collect_param_specs(_Plain) == ()

    def test_range_and_options_conflict(self):
        class _Bad:
            x: Annotated[int, Range(min=0), Options(1, 2)] = 1
        with pytest.raises(TypeError, match="mutually exclusive"):
            collect_param_specs(_Bad)


# ---------------------------------------------------------------------------
# Versioning and tags
# ---------------------------------------------------------------------------

class TestVersioning:
    """Test @processor_version and @processor_tags."""

    def test_version_stamped(self):
        assert Dilation.__processor_version__ == '1.0.0'

    def test_missing_version_warns_once(self):
        """An unversioned concrete processor warns on first instantiation."""
        class _Unversioned(ImageTransform):
            def apply(self, source, **kwargs):
                return source

        with pytest.warns(UserWarning, match="does not declare"):
            _Unversioned()
        with warnings.catch_warnings():
            warnings.simplefilter('error')
            _Unversioned()

    def test_versioned_does_not_warn(self):
        with warnings.catch_warnings():
            warnings.simplefilter('error')
            _Invert()

    def test_tags(self):
        tags = Erosion.__processor_tags__
        assert tags['category'] is ProcessorCategory.MORPHOLOGY

    def test_tags_with_description(self):
        @processor_tags(category=ProcessorCategory.TEXTURE, description='x')
        class _Tagged:
            pass
        assert _Tagged.__processor_tags__ == {
            'category': ProcessorCategory.TEXTURE, 'description': 'x',
        }

    def test_invalid_category_raises(self):
        with pytest.raises(TypeError, match="ProcessorCategory"):
            processor_tags(category='filters')


# ---------------------------------------------------------------------------
# Base classes
# ---------------------------------------------------------------------------

class TestImageTransform:
    """Test ImageTransform, runtime overrides, and in-place application."""

    def test_abstract(self):
        with pytest.raises(TypeError):
            ImageTransform()

    def test_analyzer_abstract(self):
        with pytest.raises(TypeError):
            ImageAnalyzer()

    def test_runtime_override(self):
        image = np.zeros((2, 2), dtype=np.uint8)
        result = _AddConstant(offset=1).apply(image, offset=5)
        np.testing.assert_array_equal(result, 5)

    def test_runtime_override_validated(self):
        image = np.zeros((2, 2), dtype=np.uint8)
        with pytest.raises(ValueError, match="above maximum"):
            _AddConstant().apply(image, offset=300)

    def test_unknown_kwargs_ignored(self):
        image = np.zeros((2, 2), dtype=np.uint8)
        result = _AddConstant(offset=2).apply(image, unrelated=1)
        np.testing.assert_array_equal(result, 2)

    def test_input_not_modified(self):
        image = np.full((3, 3), 10, dtype=np.uint8)
        _AddConstant(offset=3).apply(image)
        np.testing.assert_array_equal(image, 10)

    def test_channelwise_rgb(self):
        """RGB input is processed per channel and keeps its shape."""
        image = np.zeros((2, 3, 3), dtype=np.uint8)
        image[..., 1] = 100
        result = _AddConstant(offset=4).apply(image)
        assert result.shape == (2, 3, 3)
        np.testing.assert_array_equal(result[..., 0], 4)
        np.testing.assert_array_equal(result[..., 1], 104)

    def test_channelwise_rejects_bad_shape(self):
        with pytest.raises(ValidationError, match="shape"):
            _AddConstant().apply(np.zeros((2, 2, 2), dtype=np.uint8))

    def test_accepts_pixel_buffer(self):
        buf = PixelBuffer(np.zeros((2, 2), dtype=np.uint8))
        result = _AddConstant(offset=7).apply(buf)
        np.testing.assert_array_equal(result, 7)

    def test_apply_in_place(self):
        """apply_in_place writes the result into the caller's buffer."""
        buf = PixelBuffer(np.full((3, 3), 20, dtype=np.uint8))
        _AddConstant(offset=1).apply_in_place(buf)
        assert buf.get_gray(2, 2) == 21

    def test_repr_lists_params(self):
        assert repr(_AddConstant(offset=3)) == '_AddConstant(offset=3)'


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------

class TestPipeline:
    """Test sequential composition."""

    def test_sequential_order(self):
        image = np.zeros((2, 2), dtype=np.uint8)
        pipe = Pipeline([_AddConstant(offset=10), _Invert()])
        np.testing.assert_array_equal(pipe.apply(image), 245)

    def test_len_and_steps(self):
        steps = [_AddConstant(), _Invert()]
        pipe = Pipeline(steps)
        assert len(pipe) == 2
        assert pipe.steps == steps
        assert pipe.steps is not steps

    def test_empty_raises(self):
        with pytest.raises(ValueError, match="at least one"):
            Pipeline([])

    def test_non_transform_raises(self):
        with pytest.raises(TypeError, match="Step 1"):
            Pipeline([_Invert(), object()])

    def test_nested(self):
        image = np.zeros((2, 2), dtype=np.uint8)
        inner = Pipeline([_AddConstant(offset=1), _AddConstant(offset=2)])
        outer = Pipeline([inner, _AddConstant(offset=3)])
        np.testing.assert_array_equal(outer.apply(image), 6)

    def test_kwargs_forwarded(self):
        image = np.zeros((2, 2), dtype=np.uint8)
        pipe = Pipeline([_AddConstant(), _AddConstant()])
        np.testing.assert_array_equal(pipe.apply(image, offset=4), 8)

    def test_repr(self):
        assert repr(Pipeline([_Invert()])) == "Pipeline(['_Invert'])"
