"""Unit tests for saving and loading model parameters"""
import os
import json
import tempfile
import unittest
import numpy as np
from FunctionApproximators import ArchiveError, ModelParametersRBFN, ModelParametersPolynomialRegression, \
    serialize, deserialize, saveModelParameters, loadModelParameters, registerModelParameters, \
    getRegisteredModelParameters
from test_modelParameters import createAllModelParameters


class ModelParametersArchiveTests(unittest.TestCase):

    def setUp(self):
        self.tempdir = tempfile.TemporaryDirectory()
        self.all_model_parameters = createAllModelParameters()

    def tearDown(self):
        self.tempdir.cleanup()

    def test_registered(self):
        self.assertEqual(getRegisteredModelParameters(),
                         ["ModelParametersGPR", "ModelParametersLWR", "ModelParametersPolynomialRegression",
                          "ModelParametersRBFN", "ModelParametersUnified"])

    def test_round_trip(self):
        for p in self.all_model_parameters:
            q = deserialize(serialize(p))
            self.assertIs(type(q), type(p))
            self.assertEqual(q.toString(), p.toString())
            self.assertEqual(q.getExpectedInputDim(), p.getExpectedInputDim())

    def test_round_trip_through_json(self):
        for p in self.all_model_parameters:
            q = deserialize(json.loads(json.dumps(serialize(p))))
            self.assertEqual(q.toString(), p.toString())

    def test_round_trip_keeps_selection(self):
        p = ModelParametersRBFN([[0], [1]], [[0.5], [0.5]], [2, 4])
        p.setSelectedParameters({"weights"})
        p.setParameterVectorSelected(np.array([3, 3]))

        q = deserialize(serialize(p))
        self.assertEqual(q.getSelectedParameters(), {"weights"})
        minimums, maximums = q.getParameterVectorSelectedMinMax()
        self.assertTrue(np.allclose(minimums, [2, 2]))
        self.assertTrue(np.allclose(maximums, [4, 4]))
        self.assertTrue(np.allclose(q.getParameterVectorSelected(normalized=True), [0.5, 0.5]))

    def test_save_and_load(self):
        for i, p in enumerate(self.all_model_parameters):
            filename = os.path.join(self.tempdir.name, "archives", str(i) + "_model_parameters.json")
            self.assertTrue(saveModelParameters(filename, p))
            q = loadModelParameters(filename)
            self.assertEqual(q.toString(), p.toString())

    def test_save_no_overwrite(self):
        filename = os.path.join(self.tempdir.name, "model_parameters.json")
        first, second = self.all_model_parameters[1], self.all_model_parameters[4]
        self.assertTrue(saveModelParameters(filename, first))
        self.assertFalse(saveModelParameters(filename, second, overwrite=False))
        self.assertEqual(loadModelParameters(filename).toString(), first.toString())
        self.assertTrue(saveModelParameters(filename, second))
        self.assertEqual(loadModelParameters(filename).toString(), second.toString())

    def test_unknown_class(self):
        with self.assertRaises(ArchiveError):
            deserialize({"class": "ModelParametersUnknown", "parameters": {}})

    def test_malformed(self):
        with self.assertRaises(ArchiveError):
            deserialize({"parameters": {}})
        with self.assertRaises(ArchiveError):
            deserialize([1, 2, 3])
        with self.assertRaises(ArchiveError):
            deserialize({"class": "ModelParametersRBFN", "parameters": {"centers": [[0]]}})
        with self.assertRaises(ArchiveError):
            deserialize({"class": "ModelParametersRBFN",
                         "parameters": {"centers": [[0]], "widths": [[1]], "weights": [1, 2]}})

    def test_missing_and_corrupt_file(self):
        with self.assertRaises(ArchiveError):
            loadModelParameters(os.path.join(self.tempdir.name, "missing.json"))

        filename = os.path.join(self.tempdir.name, "corrupt.json")
        with open(filename, "w") as f:
            f.write("{ not json")
        with self.assertRaises(ArchiveError):
            loadModelParameters(filename)

        binary = os.path.join(self.tempdir.name, "binary.json")
        with open(binary, "wb") as f:
            f.write(b"\xff\xfe\x00garbage")
        with self.assertRaises(ArchiveError):
            loadModelParameters(binary)

    def test_reference_vector_of_wrong_length(self):
        archive = {"class": "ModelParametersRBFN",
                   "parameters": {"centers": [[0], [1]], "widths": [[0.5], [0.5]], "weights": [2, 4],
                                  "selected_parameters": ["weights"],
                                  "reference_parameter_vector": [1.0]}}
        with self.assertRaises(ArchiveError):
            deserialize(archive)

        archive["parameters"]["reference_parameter_vector"] = [0, 1, 0.5, 0.5, 2, 4]
        p = deserialize(archive)
        self.assertTrue(np.allclose(p.getParameterVectorSelected(normalized=True), [0, 1]))

    def test_unregistered_class(self):
        class ModelParametersUnregistered(ModelParametersPolynomialRegression):
            pass

        with self.assertRaises(ArchiveError):
            serialize(ModelParametersUnregistered([1, 2], 1))

    def test_duplicate_registration(self):
        duplicate = type("ModelParametersRBFN", (ModelParametersPolynomialRegression,), {})
        with self.assertRaises(ValueError):
            registerModelParameters(duplicate)


if __name__ == '__main__':
    unittest.main()
