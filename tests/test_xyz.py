import math

import pytest

from planegeom.xyz import (
    distance,
    distance_line_to_line,
    distance_point_to_line,
    equals,
    vector_dot,
    vector_length,
    vector_normalize,
)


@pytest.mark.parametrize(
    "v1, v2, v3, v4, expected",
    [
        (
            [0.44022007739138613, 0.833525569726002, 0.49302724302422873],
            [0.05162589254031058, 0.977176382882891, 0.8789402270478548],
            [0.7534455876162328, 0.6173555367190986, 0.27126435983727104],
            [0.8452219342333697, 0.5825792503932398, 0.4764854482064663],
            0.038538086185549936,
        ),
        (
            [0.20955744747823457, 0.5172686316103566, 0.6801997230482258],
            [0.5189545122370025, 0.7138294585693206, 0.1703904366365746],
            [0.1299667150322601, 0.42936729516932814, 0.39447696995105985],
            [0.210552526485147, 0.08442740855375197, 0.14719730521711372],
            0.08319681358256323,
        ),
        (
            [0.42923106228931585, 0.8789539905529137, 0.9049839556871452],
            [0.8179157436095014, 0.7590965973803714, 0.3675305177597894],
            [0.41420869787405223, 0.15048205340073806, 0.2379018154739312],
            [0.3062271094133202, 0.9149564562570988, 0.2890144389739814],
            -0.1610693535943949,
        ),
        (
            [0.0720367621447221, 0.6033943848353848, 0.28404356439509015],
            [0.40509222469259154, 0.7434042304355827, 0.04742003850930543],
            [0.7578339439559231, 0.22202382516160535, 0.6213020508504824],
            [0.9107151373683526, 0.9928925052966305, 0.5935476692418898],
            0.165414461105585,
        ),
        (
            [0.6379012306377657, 0.0364320825224973, 0.6069364718946939],
            [0.07681594329836916, 0.7271795021838152, 0.5337993618776601],
            [0.6836358505889734, 0.16314352434181822, 0.2086152270084457],
            [0.25971610921754373, 0.6593843789584228, 0.45988798892115257],
            0.5622548561208845,
        ),
    ],
)
def test_vector_dot(v1, v2, v3, v4, expected):
    assert vector_dot(v1, v2, v3, v4) == expected


@pytest.mark.parametrize(
    "vector, expected",
    [
        ([0.050809870984833916, 0.31035561291492797, 0.001499306503938036], 0.3144908542029304),
        ([0.3778623754360245, 0.5961241142000473, 0.1543705256123552], 0.7224778152156514),
        ([0.17262019190470224, 0.8427909969516906, 0.7320393785809436], 1.1295910972512198),
        ([0.9902618503498587, 0.7797449095443413, 0.6700506102217009], 1.4274412339837714),
        ([0.7261126271829389, 0.5908928510465574, 0.49826419025381485], 1.0605004064410954),
    ],
)
def test_vector_length(vector, expected):
    assert vector_length(vector) == expected


@pytest.mark.parametrize(
    "vector, expected",
    [
        (
            [0.9807055460429551, 0.8643056316322373, 0.08720913878428183],
            [0.7485619198694545, 0.6597151260937918, 0.06656579094706616],
        ),
        (
            [0.19711119037615354, 0.022309298847895676, 0.39090961970304994],
            [0.449654368739906, 0.05089246161690294, 0.8917515943488349],
        ),
        (
            [0.9127793841967227, 0.6724248357179903, 0.040467674312273494],
            [0.8046063719236741, 0.5927361165530226, 0.03567187117973928],
        ),
        (
            [0.953437460047214, 0.4056862296158039, 0.7368918558390393],
            [0.7498706721738382, 0.3190688623442679, 0.5795593464830763],
        ),
        (
            [0.3364349123702868, 0.267116248617841, 0.5027935537217091],
            [0.5087342893100769, 0.4039152594074621, 0.7602906589574631],
        ),
    ],
)
def test_vector_normalize(vector, expected):
    assert vector_normalize(vector) == expected


@pytest.mark.parametrize(
    "p1, p2, expected",
    [
        (
            [0.05790978948805059, 0.7487914339893872, 0.3097809883247721],
            [0.5544543275873585, 0.886648581134798, 0.8226072117199881],
            0.727015685344633,
        ),
        (
            [0.9058291726317237, 0.8027685679074159, 0.688622556298369],
            [0.46032889533195054, 0.0914326830074278, 0.8023165442624004],
            0.8469920667395824,
        ),
        (
            [0.9821931669640064, 0.15876616854845904, 0.8667924896764038],
            [0.4323369560803155, 0.8695237851937236, 0.5416149195711873],
            0.9556456949969271,
        ),
        (
            [0.35061245555917053, 0.8960408311058482, 0.7746746016337248],
            [0.32001410072017566, 0.10172334453953935, 0.7859415388836344],
            0.7949864606764474,
        ),
        (
            [0.9853903683176634, 0.09446182616512078, 0.6628108344597603],
            [0.05653802094599025, 0.2917024120888081, 0.1664559286406906],
            1.0714656898305444,
        ),
    ],
)
def test_distance(p1, p2, expected):
    assert distance(p1, p2) == expected


@pytest.mark.parametrize(
    "l1s, l1e, l2s, l2e, expected",
    [
        (
            [0.7741081331418179, 0.21173250439922287, 0.38051542958688733],
            [0.24786497671483976, 0.9619118750989877, 0.5580971994370003],
            [0.15681267365775853, 0.880199192600833, 0.7922662558231603],
            [0.7011220236566095, 0.03865047746667638, 0.8725545997644786],
            0.2642018761133755,
        ),
        (
            [0.6866849797685883, 0.7768264682122077, 0.6906860665173048],
            [0.3725562200019461, 0.3273245439357202, 0.3994607184268433],
            [0.11184492626414366, 0.5616613808469744, 0.502654956297042],
            [0.5615007976601206, 0.8098111847087466, 0.8597931511661152],
            0.2120619972390977,
        ),
        (
            [0.14324831422763928, 0.1976764146480534, 0.6232929645076098],
            [0.44953958873649036, 3.5239563737987645e-4, 0.7712169838831762],
            [0.7545925980004722, 0.2637482401207386, 0.2724556780759071],
            [0.25710142520446666, 0.8181769277392215, 0.6125714339070055],
            0.5272955676770279,
        ),
        (
            [0.368839171686284, 0.19495025186182324, 0.48535590338977685],
            [0.43949536746898277, 0.9141491603204804, 0.06329907441509253],
            [0.6108422671987475, 0.7906113775550576, 0.04431489641722197],
            [0.08734478071906804, 0.5638793723135712, 0.4573656361895869],
            0.008723033474112478,
        ),
        (
            [0.021673226025721415, 0.733857154166252, 0.8547874752704443],
            [0.9102489826857886, 0.2059521582591355, 0.569799533506188],
            [0.04719383832534252, 0.579365817650374, 0.45780393239823747],
            [0.8653051887590829, 0.3768753311397194, 0.2575471442865518],
            0.34405671586126135,
        ),
    ],
)
def test_distance_line_to_line(l1s, l1e, l2s, l2e, expected):
    assert distance_line_to_line(l1s, l1e, l2s, l2e) == expected


@pytest.mark.parametrize(
    "p, start, end, expected",
    [
        (
            [0.6653423449125663, 0.25829302403948784, 0.09776737959637871],
            [0.9446232000628368, 0.8518235691174553, 0.7861793928492881],
            [0.08328344949056798, 0.11359339931864088, 0.7238095172075693],
            0.7076174111284124,
        ),
        (
            [0.3056340253059928, 0.548272835230905, 0.9174205725375176],
            [0.9473664418937926, 0.5138296811763381, 0.8850559878558496],
            [0.6875714575802029, 0.34243488501137487, 0.43883146208982726],
            0.5845239962606498,
        ),
        (
            [0.17925466242492893, 0.25326178211346384, 0.43900958861438044],
            [0.3462415885096438, 0.6058198433952049, 0.04313179002608547],
            [0.6299539377475025, 0.6777591017854, 0.8777643731216357],
            0.47331436935257626,
        ),
        (
            [0.6452433791475372, 0.7508024881952754, 0.9118212667989819],
            [0.043285204500404406, 0.825429320166729, 0.16788006864300675],
            [0.08903335403896706, 0.9435616168756346, 0.24718902961638278],
            0.8878410242961485,
        ),
        (
            [0.48829408889602244, 0.628882048212391, 0.9413675943438186],
            [0.910739892900317, 0.8188321183330397, 0.9792667071608953],
            [0.10973730289482764, 0.6344963586547071, 0.09552384295243632],
            0.3198693050691922,
        ),
    ],
)
def test_distance_point_to_line(p, start, end, expected):
    assert distance_point_to_line(p, start, end) == expected


@pytest.mark.parametrize(
    "p1, p2",
    [
        ([0.9674898015414836, 0.02624230336884803, 0.34208659688222187],
         [0.35932783559039183, 0.5111822990523828, 0.3927940423315276]),
        ([0.6538035324502031, 0.1197867740640145, 0.9713753698395488],
         [0.8526516675217474, 0.13873098842131826, 0.6071218166426663]),
        ([0.7171640483537938, 0.9237446591375224, 0.153341134286061],
         [0.10067104615631928, 0.9025079507239742, 0.2625867527336143]),
        ([0.21503646116881991, 0.3273197157358999, 0.07232487899719986],
         [0.5914194401153642, 0.02735318122495156, 0.3163177142935619]),
        ([0.43841576728845855, 0.7257060784407421, 0.9389273557450912],
         [0.23129358543810752, 0.38457770238327604, 0.3875535459930316]),
    ],
)
def test_equals_false_cases(p1, p2):
    assert equals(p1, p2) is False


def test_equals_with_nan_z_and_identity():
    assert equals([1.0, 2.0, math.nan], [1.0, 2.0, math.nan]) is True
    assert equals([1.0, 2.0, 3.0], [1.0, 2.0, 3.0]) is True
    assert equals([1.0, 2.0, 3.0], [1.0, 2.0, math.nan]) is False


def test_example_values():
    assert distance([0, 0, 0], [10, 0, 0]) == 10
    assert distance_point_to_line([0, 0, 0], [10, 0, 10], [10, 0, -10]) == 10
    assert distance_line_to_line([10, 0, 10], [10, 0, -10], [0, 0, 10], [0, 0, -10]) == 10
    assert equals([0, 0], [10, 0]) is False
    assert vector_length([0.050809870984833916, 0.31035561291492797, 0.001499306503938036]) == 0.3144908542029304


def test_distance_falls_back_to_2d_for_nan_z():
    assert distance([0.0, 0.0, math.nan], [3.0, 4.0, 100.0]) == 5.0


def test_distance_point_to_line_rejects_nan():
    with pytest.raises(ValueError):
        distance_point_to_line([0.0, 0.0, 0.0], [0.0, 0.0, math.nan], [1.0, 1.0, math.nan])


def test_distance_line_to_line_rejects_nan():
    with pytest.raises(ValueError):
        distance_line_to_line([0.0, 0.0, 0.0], [1.0, 1.0, 1.0], [math.nan, 0.0, 0.0], [2.0, 2.0, 2.0])


def test_normalized_vector_has_unit_length():
    assert math.isclose(vector_length(vector_normalize([3.0, -7.5, 2.25])), 1.0)


def test_distance_is_symmetric():
    a = [0.1, 0.7, 0.3]
    b = [0.9, 0.2, 0.8]
    assert distance(a, b) == distance(b, a)