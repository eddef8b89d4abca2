"""Tests for the ExploreTensors use-case."""
import logging

import pytest

from src.domain.entities.results import ExplorationReport
from src.domain.use_cases.explore_tensors import ExploreTensors


@pytest.fixture
def report(toolkit):
    return ExploreTensors(toolkit=toolkit).run()


def test_returns_report(report):
    assert isinstance(report, ExplorationReport)


def test_creation_shapes(report):
    assert report.shape_of("scalar") == ()
    assert report.shape_of("vector") == (4,)
    assert report.shape_of("matrix") == (2, 3)
    assert report.tensors["scalar"].dtype == "float32"


def test_dtypes(report):
    assert report.tensors["ints"].dtype == "int32"
    assert report.tensors["floats"].dtype == "float32"


def test_axes(report):
    assert report.shape_of("col_means") == (3,)
    assert report.shape_of("row_means") == (4,)
    assert report.shape_of("col_means_keep") == (1, 3)
    assert report.values["col_means"] == [4.5, 5.5, 6.5]
    assert report.values["row_means"] == [1.0, 4.0, 7.0, 10.0]


def test_broadcasting(report):
    assert report.shape_of("xb") == (6, 3)
    assert report.shape_of("xb_shifted") == (6, 3)
    assert report.shape_of("bad") == (6,)
    assert report.broadcast_checks == {
        "matrix+row_vector": True,
        "matrix+column_length_vector": False,
    }


def test_square_matrix_broadcasts_both_ways(toolkit):
    """When rows equal columns the column-length vector lines up with the last axis."""
    report = ExploreTensors(toolkit=toolkit, broadcast_rows=3).run()
    assert report.broadcast_checks["matrix+column_length_vector"] is True


def test_slicing(report):
    assert report.shape_of("first3_rows") == (3, 5)
    assert report.shape_of("col2") == (10, 1)
    assert report.shape_of("col2_vec") == (10,)
    assert report.shape_of("picked_rows") == (3, 5)
    assert report.values["col2_vec"][:3] == pytest.approx([0.2, 0.7, 1.2])
    assert report.values["picked_rows"][0] == 0.0
    assert report.values["picked_rows"][5] == pytest.approx(1.5)
    assert report.values["picked_rows"][10] == pytest.approx(4.5)


def test_reshape(report):
    assert report.shape_of("a") == (2, 6)
    assert report.shape_of("a_reshaped") == (3, 4)
    assert report.shape_of("a_t") == (4, 3)


def test_reductions(report):
    assert report.shape_of("sum_all") == ()
    assert report.values["sum_all"] == [66.0]
    assert report.values["sum_cols"] == [18.0, 22.0, 26.0]
    assert report.values["sum_rows"] == [3.0, 12.0, 21.0, 30.0]


def test_standardization(report):
    assert report.shape_of("dataset") == (200, 3)
    assert report.shape_of("mean") == (1, 3)
    assert report.shape_of("std") == (1, 3)
    assert report.shape_of("x_std") == (200, 3)
    assert report.shape_of("ones") == (200, 1)
    assert report.shape_of("x_bias") == (200, 4)


def test_standardization_follows_configured_size(toolkit):
    report = ExploreTensors(toolkit=toolkit, num_samples=10, num_features=5).run()
    assert report.shape_of("x_std") == (10, 5)
    assert report.shape_of("x_bias") == (10, 6)


def test_tensors_recorded_in_section_order(report):
    labels = list(report.tensors)
    assert labels[0] == "scalar"
    assert labels.index("ints") < labels.index("axes_x") < labels.index("xb")
    assert labels[-1] == "x_bias"


def test_logs_every_tensor(toolkit, caplog):
    with caplog.at_level(logging.INFO, logger="src.domain.use_cases.explore_tensors"):
        report = ExploreTensors(toolkit=toolkit).run()
    assert "scalar: shape=() rank=0 dtype=float32" in caplog.text
    assert "broadcast matrix+column_length_vector: incompatible" in caplog.text
    assert f"{len(report.tensors)} tensors inspected" in caplog.text


def test_debug_logs_previews(toolkit, caplog):
    with caplog.at_level(logging.DEBUG, logger="src.domain.use_cases.explore_tensors"):
        ExploreTensors(toolkit=toolkit, preview_rows=2, preview_cols=2).run()
    assert "matrix (preview): [0.0, 1.0, 3.0, 4.0]" in caplog.text


@pytest.mark.parametrize("input_scale", [0.0, -50.0])
def test_non_positive_input_scale_rejected(toolkit, input_scale):
    with pytest.raises(ValueError, match="input_scale must be positive"):
        ExploreTensors(toolkit=toolkit, input_scale=input_scale)
