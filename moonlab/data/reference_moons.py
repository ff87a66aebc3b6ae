"""
Fixed reference moons.

Hardcoded coordinates of the two moons shown on the demo page of the
Gradient Starvation publication
(https://mohammadpz.github.io/GradientStarvation.html). The points are a
golden dataset for reproducible benchmarks and are never regenerated.
"""

from __future__ import annotations

import math

import numpy as np

from moonlab.data.labeled_dataset import LabeledDataset
from moonlab.utils.errors import InvalidArgumentError

POINTS_PER_CLASS = 150

_CLASS_0_POINTS = np.array(
    [
        [-2.717835893494339, 0.6793610085529345],
        [-2.0025756608302556, -0.7764598781122054],
        [-2.568929506049188, 1.3030331041149927],
        [-2.270602886384911, 1.696103804129755],
        [-2.5015948773601426, 1.8362701766489786],
        [-2.330151863221954, 0.5295968005263707],
        [-0.7415685155965577, 3.5042711192603146],
        [-2.0839366412304012, -0.7231575356785352],
        [-2.8528165357526083, 2.277743746352307],
        [-1.147008103324011, 3.1121491784480697],
        [-2.8784004738595304, 1.4770243521157966],
        [-0.8677959198389527, -1.0110529899688063],
        [-1.7589836417118123, -0.21940659318914466],
        [-2.998388218477527, 1.2783156815611991],
        [-2.122794047965966, -0.1791718798868415],
        [-0.6950154023659438, 3.884218615064042],
        [-2.6642421732719845, 1.9439974190429932],
        [-0.4107292059512281, 3.505002569928259],
        [-2.5650150317912725, 0.5755380178279407],
        [-0.03957624387021477, -1.210873365508656],
        [-1.459975933353292, -1.0329923799436405],
        [-1.7826178769431, -1.0582442212859733],
        [-0.0063910086450723325, 3.6142846309958205],
        [-3.113867547530851, 1.5445673874139447],
        [-2.8910961520154546, 1.6469163448206863],
        [-2.3718952252880245, 0.2540079910444923],
        [-1.3897222631802355, -1.258967648201369],
        [-2.1375714939983066, 2.794453234058449],
        [-0.9994610567775488, -1.149826801806625],
        [-0.7776520784930578, 4.1149852157058895],
        [-0.353388277001343, -1.4081025494488113],
        [-0.02895203726210091, 3.5570091502314423],
        [-0.6726983784145278, 3.713458077324815],
        [-2.2946962578019665, 0.9623315035843127],
        [-1.863557466465306, 2.792146626757914],
        [-0.26730788088522667, -1.205590370248826],
        [-2.498303344433606, 1.3344598403007284],
        [-0.9859628310147427, 3.057031649768471],
        [-2.3015390566521345, 2.578789613141873],
        [-2.182161422047994, -0.6543242980905074],
        [-0.6476638289513104, -1.2100425673015185],
        [-1.9828161461009488, 2.9197086781500277],
        [-2.759334618718058, 0.7696706532935776],
        [-2.5751009200744224, 1.6626933401609023],
        [-2.2754802700838868, 0.42253538652727796],
        [-2.894718819023576, 1.4631522384301066],
        [-2.3942266106035563, 2.942466273998301],
        [-2.3597155702364154, 1.2364964850094777],
        [-0.8619147842448072, 3.152143289401243],
        [-1.5585362847484685, 3.6228480325523322],
        [-2.2329166647636507, -0.6233110354243981],
        [-0.2731017075516541, -1.3580082036894057],
        [-0.4781390413985451, -1.305693088622172],
        [-1.7901443397126593, -0.3935866480543121],
        [-1.1433045993548665, 3.111337871342845],
        [-2.0898117037306303, 2.410394433635401],
        [-1.0837510824272951, -0.7759536147862817],
        [-2.6928615859081817, 1.3340538265678492],
        [-2.649706340336663, 2.2303142906955555],
        [-2.6375589115090947, 0.3209555538663683],
        [-0.7346260030476295, 3.89346947511081],
        [-2.42417820501776, 0.7649583168967733],
        [-0.7008726348089543, -1.0802855176420891],
        [-0.3491363431388116, -1.2568494543447684],
        [-2.6855954583467803, 2.4944104537407057],
        [-0.9335914608244527, -0.679082202208783],
        [-1.1282308435392019, 3.693884882642762],
        [-1.5571341099841778, -0.9569209611232933],
        [-2.0968912603614944, -0.3002820219513763],
        [-0.730628023393316, -1.2603402702853281],
        [-0.4951985004108488, -0.729087176112734],
        [-2.902350613309882, 0.16046671198639534],
        [-1.7885697248681875, 2.8847324649501402],
        [-1.4751061664049347, 3.4142846215369556],
        [-1.5390777424462194, 2.9919434674688086],
        [-2.8762322285242092, 0.9143476976637405],
        [-0.4940392357287259, -1.0038621010673856],
        [-0.012054114845436309, 3.7992457338282373],
        [-3.032053951860437, 0.3803212691710048],
        [-2.374125805765452, 2.577260760939388],
        [-2.4025184090990277, 1.9925005915231553],
        [-1.0969861251226607, 3.0431663584149904],
        [-2.7140378394308975, 1.7300408024972684],
        [-1.753366456813175, -0.46725570847050424],
        [-2.350980683560984, -0.25749919862715076],
        [-0.4481758551592373, -1.493604284214328],
        [-0.4837435351770224, 4.396876304605113],
        [-2.6861383109374612, 1.5310130579985914],
        [-2.2799772528992794, 0.11093029172240809],
        [-2.0013629328184592, -0.6139231414423276],
        [-2.9883132223545816, 0.9208951171502733],
        [-2.1215585709864007, 0.6712563554792417],
        [-2.421553486436626, 2.618298719018602],
        [-0.5889598185224101, 3.6804690431500036],
        [-2.7964229143440953, 0.48814363461182453],
        [-2.1055240403942315, 1.7996187499638172],
        [-2.550214662670338, 1.1625285801183705],
        [-2.60314101539995, 0.7389373388724324],
        [-0.7509004504010787, -1.2211299676858136],
        [-1.1097198256588752, -0.8873468825484077],
        [-1.2853090821878264, 3.4776733678417986],
        [-0.06881151445833164, 3.575493958460944],
        [-1.888037104217837, 2.3985492607241343],
        [-2.655692934648788, 1.71557735708596],
        [-0.0712617816418619, 3.749934520345652],
        [-2.237386070712279, 0.3575930800531485],
        [-2.624697844350373, 2.1434683067151066],
        [-1.6932598229929476, -0.9049053449496425],
        [-3.1292392711691432, 0.10465507554354464],
        [-1.9302970612705348, 3.1473437369575374],
        [-0.05552000023091433, 3.8373893523193847],
        [-2.213859883403356, -0.2809886987751162],
        [-2.2855940763118876, -0.0809670563060226],
        [-1.5360545910906862, -1.0586183593166278],
        [-1.8423162009755345, 2.9422791248401476],
        [-1.2540315350699642, 3.3776803834259663],
        [-2.4100284289768377, 3.153656143587366],
        [-1.2316448752106524, 3.5152991121388566],
        [-1.009437911641195, -1.281563505634356],
        [-2.2341929394003626, 1.7966322608299223],
        [-1.5936721603442507, 3.523561811455531],
        [-1.4301284921136954, -0.7139026560764259],
        [-2.133956374401404, 2.830553038963384],
        [-2.5419546529030743, 1.756811334089956],
        [-2.4706384450766503, 2.7361898523968753],
        [-1.4458442971552867, -0.9036159267450711],
        [-0.675298309924629, -0.8009280139118677],
        [-0.1307759125127804, -1.3972949916010728],
        [-2.1724261559379694, 2.4380037963785406],
        [-3.0301757418373185, -0.05613139501335074],
        [-2.223984637645856, -0.9752089176334047],
        [-0.8960548947689856, 3.3757400103199693],
        [-1.6879441985156765, 3.2402795631690253],
        [-1.5656539231364017, 3.1005177839870184],
        [-1.1715302401075987, -1.0528879963506719],
        [-2.1977928180739728, 0.11441934583356184],
        [-2.3569595232747393, 2.5168873649410255],
        [-1.812798093076864, 2.960577394399894],
        [-1.0133105775192217, -0.8705594922460475],
        [-0.8510029404821573, 3.573688045781485],
        [-1.4057618612620275, -0.8907098511435746],
        [-0.8426327453397771, 3.294176954534472],
        [-1.919390352513409, -0.08783059329234524],
        [-2.7504997471435866, 2.292660484192841],
        [-1.463129347902804, 3.4597453566827],
        [-2.7820769325267394, 0.253560604420727],
        [-1.9904715999050417, -0.39806607018651047],
        [-2.0374228816770796, 2.5778821384858093],
        [-1.9573778533077693, -0.7882243058017496],
        [-1.0107773780231675, -0.9895456553950488],
    ]
)

_CLASS_1_POINTS = np.array(
    [
        [1.2605697631874289, 1.0458976448210704],
        [0.4428841761287988, -3.9067277248882855],
        [2.213537711353039, 0.10622312924614075],
        [2.2246476075616277, -3.131178556347437],
        [0.934302193080736, 1.01212401276388],
        [0.8703714425371154, 1.14213909231317],
        [2.6652808441973175, -1.499740679978164],
        [2.5868192990813768, -2.3757729401741026],
        [2.5485659972780015, -2.122671490779725],
        [1.3501341878455395, -3.502953002856569],
        [1.3394525649634517, -3.256081109078368],
        [1.5703488118666078, -3.1749520646753595],
        [2.578906600693658, -2.155913453889749],
        [2.6017725256967363, -0.2395214626274446],
        [0.4855765554512216, 0.9755334524010564],
        [1.620317196388419, -3.471619676384854],
        [0.6107465335988917, 0.9470748554316055],
        [2.705677633402291, -1.8958980011427715],
        [2.529619115397467, -1.750911067902624],
        [1.7205080921848972, 0.6014389134684253],
        [2.025034051353637, -0.328098369799075],
        [0.9454991520471547, -3.4065530755818263],
        [2.4474158496753415, -0.570775344749403],
        [0.44018725848007784, 1.2583085822944136],
        [2.3578626209991933, 0.37952520933453554],
        [2.305287296588136, -1.3523455959069988],
        [2.1078203674554112, -2.9400776134322326],
        [2.5672512309425377, -0.931511238718386],
        [0.76210430597206, 0.9834249491123324],
        [0.9009064185658802, -3.5025716943059186],
        [0.8790969921498528, -4.248785250853195],
        [2.834290242153208, -0.6773777546863811],
        [1.827620864188383, -3.146614604919824],
        [0.9106326766024155, 1.6069751824711314],
        [2.4986568505695774, 0.12949305293031732],
        [1.329902276945841, 0.8261796714411879],
        [0.30026706132425485, -3.569524692879105],
        [1.8709094482262436, 0.7005037664902201],
        [2.6457300611721415, -2.425440866187578],
        [0.903254228522091, -3.738092107397064],
        [1.6008172396371303, -3.2452624729025747],
        [3.2153091597614525, -1.368470502749851],
        [2.5679011437621266, 0.07815030521334698],
        [2.359601929920219, -2.430664435412014],
        [2.0630126331781993, -0.3937883060575643],
        [0.9482707644288992, 0.9090318588982524],
        [1.318717891036563, -3.2871385464785274],
        [2.685806352629474, -1.0695984302841914],
        [1.8516766580167963, 0.24434407871756103],
        [2.356710102702996, -2.25954235705039],
        [2.1684918727788336, -0.7439150005837414],
        [1.5800357609867945, -3.0397095698565275],
        [1.033126269584137, 0.9359563676278917],
        [1.872794212999521, 1.0115209086189823],
        [0.5235449122291833, -3.3783557249585123],
        [0.7008785749342308, 0.9594224070734308],
        [2.553663974985213, -0.10771629916989434],
        [2.7411100225680163, -1.7184897675482067],
        [2.0343480716575852, -2.708724275370595],
        [0.5340990535248212, 1.6742944306376044],
        [2.4353923087262066, -2.2521686832796735],
        [2.697340999301913, -0.3155915671715026],
        [2.6521161619740408, -1.3799617068714918],
        [0.8016750570795748, -3.7029324960425725],
        [2.0888346508237094, 0.6295951027167603],
        [0.8304001118980417, 1.3620703160533432],
        [2.1076008673731175, -2.6320189409595427],
        [0.3589801618753179, 1.2235177121091534],
        [1.1229934118941256, -3.3223373231734046],
        [1.3365490905708357, 0.7410339357717708],
        [1.8354193619448524, 0.5026708223105636],
        [2.718680142657365, -1.2659346176335473],
        [1.114668177329429, 1.1018873624037109],
        [2.4373081838238693, -1.7793888239691904],
        [2.414593845611318, -0.6335066629431028],
        [0.12290616957133377, 0.7436758886663175],
        [2.432773932914067, -2.271922352203361],
        [2.703247300810249, -1.5681088934930953],
        [0.9329542112336406, 1.387487453946818],
        [1.8387052373191828, -0.18205302519419486],
        [2.192531994043116, 0.7509498665446229],
        [0.9347932451321164, 1.1304461649366861],
        [2.6506791700072787, 0.2598239003357525],
        [1.4357888060935096, -3.638173831524141],
        [2.5074984951495582, -0.3246237440748867],
        [1.452676080486036, -3.846851795839017],
        [2.1649169298468043, 0.12598502378608517],
        [2.096317932113875, -2.974937206560519],
        [1.1626855473307327, -3.611991741390597],
        [0.0698015672586913, -3.6894705097537193],
        [2.263884734272171, -2.792874862433873],
        [2.452097505628506, -2.998549361725964],
        [2.318232969547698, -2.520540198719894],
        [1.5708028678519623, 0.6171082788895208],
        [1.7619872579964682, -3.1598996224476084],
        [0.48741766950630805, 1.5195493259285597],
        [2.2860590634348394, -1.9538102221406346],
        [2.355561815069757, -2.061630645113948],
        [2.624438667886823, -0.45792310107331247],
        [1.854267558549543, 0.07907581142523268],
        [2.3213276658541218, -0.10696635485443987],
        [2.745584480726928, -1.710269012859103],
        [0.11463689662493518, -3.60107422436533],
        [1.2268104662722987, 1.1092227889389914],
        [0.4883558476641737, -3.7822078275343984],
        [0.302830362550608, -4.21797263754794],
        [2.8418136908650427, -1.719272711473141],
        [2.4110065851996403, -2.58454577962155],
        [1.1883288319221876, -3.436277286035127],
        [0.4231560219611501, 0.9974824865464593],
        [2.7332667742376247, -1.2960555247563033],
        [2.4548799817800466, -2.098906157582724],
        [1.4492552216872536, -3.2980549567958297],
        [0.29812737679036055, -4.140712584756083],
        [0.6024251082982855, -3.6668594006359907],
        [2.4071077716684606, -1.9331827888832867],
        [2.545623250801896, -1.6997537944929542],
        [1.1447541103640393, 1.2288964589068012],
        [1.6300111419299077, -3.280361193419007],
        [2.2144073814114598, -2.7915168449133825],
        [1.741764282945776, 0.716151381796484],
        [2.584934801845699, -0.4617926598386114],
        [2.94429370319911, -0.7751800733034873],
        [0.04396728231852283, 1.5080467962694248],
        [1.511277836871522, -3.601524555444186],
        [1.5078872546350166, 0.4038862638181287],
        [2.2830235983573757, -2.6698628730744787],
        [1.141833418913716, -3.534713771642897],
        [2.31153512617248, -1.5036639589034162],
        [0.7930014449666454, 0.9984399344555597],
        [1.7855431618709825, 0.3775513743392528],
        [1.2496515034524522, -3.61494166755954],
        [2.494095987642121, -0.6561789952747799],
        [0.99530344900322, -3.9953414791058472],
        [1.6423078459022569, 0.8817193140291141],
        [1.2698194368721236, 1.2639173654508489],
        [2.3092312380669213, 0.6932869760752849],
        [1.508197474828362, -3.4031870404877793],
        [0.5282536325342755, -3.6982857231300157],
        [2.8592120295683343, -2.4260474342934755],
        [1.964949523096605, -3.3108893959920254],
        [2.6235858300049006, -0.7863371260473055],
        [1.2938945593806481, 0.7098721965355509],
        [2.2949841542633416, 0.21815437229061818],
        [2.347836965953938, -2.078371734274718],
        [2.3781640679457445, -1.1400343437416685],
        [2.0047220333928424, -1.2769894466119114],
        [0.5906909597410415, 1.6438700737392897],
        [1.2986453274833423, -3.0090552847647456],
        [2.667821411223028, 0.2317409067300455],
    ]
)


def generate_reference_moons(offset: float = 0.0, coordinate_downscale: float = 1.0) -> LabeledDataset:
    """
    Return the 300-point reference moons (150 points per class).

    ``offset`` shifts the x coordinate of class 0 by ``-offset`` and of
    class 1 by ``+offset``; y is left untouched. This is unrelated to the
    vertical class separation of the parametric generator. All coordinates
    are divided by ``coordinate_downscale`` after the shift.

    Args:
        offset (float): Per-class horizontal shift.
        coordinate_downscale (float): Divisor applied to every coordinate.

    Returns:
        LabeledDataset: Points ordered class 0 first, then class 1.
    """
    if not math.isfinite(offset):
        raise InvalidArgumentError(f"offset must be finite, got {offset}.")
    if not math.isfinite(coordinate_downscale) or coordinate_downscale == 0.0:
        raise InvalidArgumentError(
            f"coordinate_downscale must be finite and non-zero, got {coordinate_downscale}."
        )

    class_0 = _CLASS_0_POINTS.copy()
    class_1 = _CLASS_1_POINTS.copy()
    class_0[:, 0] -= offset
    class_1[:, 0] += offset

    points = np.vstack([class_0, class_1]) / coordinate_downscale
    labels = np.concatenate(
        [
            np.zeros(POINTS_PER_CLASS, dtype=np.int64),
            np.ones(POINTS_PER_CLASS, dtype=np.int64),
        ]
    )
    return LabeledDataset(points=points, labels=labels)
