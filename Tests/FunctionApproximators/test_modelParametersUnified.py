"""Unit tests for the conversion to unified model parameters"""
import unittest
import numpy as np
from FunctionApproximators import ModelParametersUnified, ModelParametersRBFN, ModelParametersLWR, \
    ModelParametersGPR, generateInputsGrid, gaussianKernelActivations


class ModelParametersUnifiedTests(unittest.TestCase):

    def setUp(self):
        self.inputs_1d = np.linspace(-0.5, 1.5, 21).reshape(-1, 1)
        self.inputs_2d = generateInputsGrid([-0.5, -0.5], [1.5, 1.5], [7, 5])

    def test_rbfn(self):
        rbfn = ModelParametersRBFN([[0, 0], [1, 1], [0.5, 0.5]],
                                   [[0.3, 0.3], [0.3, 0.3], [0.2, 0.4]],
                                   [1, -1, 2])
        unified = rbfn.toModelParametersUnified()
        self.assertFalse(unified.normalized_basis_functions)
        self.assertTrue(np.allclose(unified.slopes, 0))
        self.assertTrue(np.allclose(unified.offsets, rbfn.weights))
        self.assertTrue(np.allclose(unified.getOutput(self.inputs_2d), rbfn.getOutput(self.inputs_2d)))

    def test_lwr(self):
        lwr = ModelParametersLWR([[0], [0.5], [1]], [[0.2], [0.2], [0.2]], [[1], [-2], [0.5]], [0, 1, 2])
        unified = lwr.toModelParametersUnified()
        self.assertTrue(unified.normalized_basis_functions)
        self.assertTrue(np.allclose(unified.getOutput(self.inputs_1d), lwr.getOutput(self.inputs_1d)))

    def test_lwr_pivot_at_max_activation(self):
        lwr = ModelParametersLWR([[0], [0.5], [1]], [[0.2], [0.2], [0.2]], [[1], [-2], [0.5]], [0, 1, 2],
                                 lines_pivot_at_max_activation=True)
        # each line passes through its offset at the center of its basis function
        lines = lwr.getLines(lwr.centers)
        self.assertTrue(np.allclose(np.diag(lines), lwr.offsets))

        unified = lwr.toModelParametersUnified()
        self.assertTrue(np.allclose(unified.getOutput(self.inputs_1d), lwr.getOutput(self.inputs_1d)))

    def test_gpr(self):
        gpr = ModelParametersGPR([[0, 0], [1, 0], [0, 1]], [0.3, -0.2, 0.7], 2.0, [0.5, 0.8])
        unified = gpr.toModelParametersUnified()
        self.assertEqual(unified.getNumberOfBasisFunctions(), 3)
        self.assertTrue(np.allclose(unified.widths, [[0.5, 0.8]] * 3))
        self.assertTrue(np.allclose(unified.getOutput(self.inputs_2d), gpr.getOutput(self.inputs_2d)))

    def test_gpr_covariance_at_training_input(self):
        gpr = ModelParametersGPR([[0, 0], [1, 0]], [1, 0], 2.0, [0.5, 0.5])
        activations = gpr.kernelActivations(np.array([[0, 0]]))
        self.assertTrue(np.allclose(activations[0, 0], 2.0))

    def test_output(self):
        unified = ModelParametersUnified([[0], [1]], [[0.5], [0.5]], [[1], [0]], [0, 3])
        inputs = np.array([0.0, 0.5, 1.0])
        activations = gaussianKernelActivations(unified.centers, unified.widths, inputs.reshape(-1, 1))
        expected = activations[:, 0] * inputs + activations[:, 1] * 3
        self.assertTrue(np.allclose(unified.getOutput(inputs), expected))

    def test_normalized_activations_far_away(self):
        unified = ModelParametersUnified([[0], [1]], [[0.01], [0.01]], [[0], [0]], [1, 2], True)
        activations = unified.kernelActivations(np.array([[1000.0]]))
        self.assertTrue(np.all(np.isfinite(activations)))


if __name__ == '__main__':
    unittest.main()
